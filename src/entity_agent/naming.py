from __future__ import annotations
from typing import List

from entity_agent.config import GeneratorConfig, NamingRules


def _segments(identifier: str) -> List[str]:
    if not identifier:
        raise ValueError("identifier must not be empty")
    return identifier.lower().split("_")


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:]


def _strip_short_prefix(parts: List[str], naming: NamingRules) -> List[str]:
    # tb_, nr_ 같은 3글자 접두어 제거. 세그먼트가 하나뿐이면 그대로 둔다.
    if naming.strip_three_letter_prefix and len(parts) > 1 and len(parts[0]) == 3:
        return parts[1:]
    return parts


def to_field_name(identifier: str, config: GeneratorConfig) -> str:
    """
    snake_case 컬럼명 → camelCase 필드명.
    첫 세그먼트에 밑줄 없이 붙은 접두어(nrcliente)는 접두어 다음 글자를 대문자로 만든다.
    접두어가 여러 개 맞으면 knownPrefixes 순서상 첫 번째가 이긴다.
    """
    parts = _strip_short_prefix(_segments(identifier), config.naming)
    head, rest = parts[0], parts[1:]

    for prefix in config.naming.known_prefixes:
        p = prefix.lower()
        if head.startswith(p) and len(head) > len(p):
            head = p + _capitalize(head[len(p):])
            break

    return head + "".join(_capitalize(w) for w in rest)


def to_type_name(identifier: str, config: GeneratorConfig) -> str:
    """snake_case 테이블명 → PascalCase 클래스명 (TB_CLIENTE → Cliente)."""
    parts = _segments(identifier)
    table_prefixes = {p.lower() for p in config.naming.table_prefixes}

    kept = [w for w in parts if w not in table_prefixes]
    kept = _strip_short_prefix(kept, config.naming)
    if not kept:
        kept = parts

    return "".join(_capitalize(w) for w in kept)


def to_accessor_name(field_name: str) -> str:
    return _capitalize(field_name)
