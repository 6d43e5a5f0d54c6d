from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Optional

from entity_agent.config import GeneratorConfig


@dataclass(frozen=True)
class TypeMapping:
    target_type: str
    annotation: str = ""


def _contains_any(type_name: str, tokens: Iterable[str]) -> bool:
    return any(t.upper() in type_name for t in tokens)


def _upper_bound(precision: int) -> str:
    # 자릿수만큼 9를 반복한 값. 정확한 범위가 아니라 기존 생성물과의 호환용 근사치.
    return "9" * precision


def _integer_bounds(precision: int, suffix: str = "") -> str:
    if precision <= 0:
        return "@Min(0)"
    return f"@Min(0) @Max({_upper_bound(precision)}{suffix})"


def map_type(
    type_name: Optional[str],
    precision: Optional[int],
    scale: Optional[int],
    config: GeneratorConfig,
) -> TypeMapping:
    """DB 타입 + 정밀도/스케일 → (Java 타입, Bean Validation 어노테이션)."""
    db_type = (type_name or "").upper()
    precision = int(precision or 0)
    scale = int(scale or 0)
    rules = config.type_mapping

    if _contains_any(db_type, rules.number.tokens):
        num = rules.number
        if scale > 0:
            # NUMBER(2,5) 처럼 scale > precision 이면 정수부 0자리
            integer_digits = max(precision - scale, 0)
            return TypeMapping(num.decimal_type, f"@Digits(integer = {integer_digits}, fraction = {scale})")
        if precision > num.large_threshold:
            return TypeMapping(num.large_type, _integer_bounds(precision, "L"))
        return TypeMapping(num.default_type, _integer_bounds(precision))

    if _contains_any(db_type, rules.string.tokens):
        annotation = f"@Size(max = {precision})" if precision > 0 else ""
        return TypeMapping(rules.string.target_type, annotation)

    if _contains_any(db_type, rules.date.tokens):
        return TypeMapping(rules.date.target_type)

    return TypeMapping(rules.string.target_type)
