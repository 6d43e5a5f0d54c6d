"""
DTO 템플릿: 컬럼마다 검증 어노테이션이 붙은 getter 인터페이스를 만들고
Request(Base, Cadastro) / Response(Buscar)에서 조합한다.
"""
from __future__ import annotations
from entity_agent.config import GeneratorConfig
from entity_agent.model import Column, TableModel

SCHEMA_ANNOTATION = '@Schema(description = " ", example = " ")'


def _annotations(col: Column, config: GeneratorConfig) -> list[str]:
    rules = config.validation
    anns = []
    if rules.enabled:
        is_string = col.target_type == config.type_mapping.string.target_type
        anns.append(rules.string_marker if is_string else rules.other_marker)
        if col.annotation:
            anns.append(col.annotation)
    if rules.schema_annotation:
        anns.append(SCHEMA_ANNOTATION)
    return anns


def _column_interface(col: Column, config: GeneratorConfig) -> list[str]:
    ind = config.output.indent
    lines = [f"{ind}protected interface {col.type_name} {{"]
    for ann in _annotations(col, config):
        lines.append(f"{ind * 2}{ann}")
    lines.append(f"{ind * 2}{col.target_type} get{col.type_name}();")
    lines.append(f"{ind}}}")
    return lines


def render_dto(model: TableModel, config: GeneratorConfig) -> str:
    ind = config.output.indent
    names = ", ".join(c.type_name for c in model.columns)
    implements = f" implements {names}" if names else ""
    extends = f" extends {names}" if names else ""

    lines: list[str] = []
    lines.append("/** JAVA DTO **/")
    lines.append("")
    lines.append(f"public enum {model.type_name}DTO {{;")

    for col in model.columns:
        lines.append("")
        lines.extend(_column_interface(col, config))

    lines.append("")
    lines.append(f"{ind}public enum Request {{;")
    lines.append(f"{ind * 2}@Data")
    lines.append(f"{ind * 2}public static class Base{implements} {{")
    for col in model.columns:
        lines.append(f"{ind * 3}private {col.target_type} {col.field_name};")
    lines.append(f"{ind * 2}}}")
    lines.append("")
    lines.append(f"{ind * 2}@Data")
    lines.append(f"{ind * 2}@EqualsAndHashCode(callSuper = true)")
    lines.append(f"{ind * 2}public static class Cadastro extends Base {{}}")
    lines.append(f"{ind}}}")

    lines.append("")
    lines.append(f"{ind}public enum Response {{;")
    lines.append(f"{ind * 2}public interface Buscar{extends} {{}}")
    lines.append(f"{ind}}}")
    lines.append("}")
    lines.append("")
    return "\n".join(lines)
