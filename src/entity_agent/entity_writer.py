from __future__ import annotations
from entity_agent.config import GeneratorConfig
from entity_agent.model import Column, TableModel


def field_lines(col: Column, indent: str) -> list[str]:
    lines = []
    if col.is_id:
        lines.append(f"{indent}@Id")
    lines.append(f'{indent}@Column(name = "{col.original_name}")')
    lines.append(f"{indent}private {col.target_type} {col.field_name};")
    return lines


def render_entity(model: TableModel, config: GeneratorConfig) -> str:
    ind = config.output.indent
    lines: list[str] = []

    lines.append("/** JAVA ENTITY **/")
    lines.append("")
    lines.append("@Data")
    lines.append("@Entity")
    lines.append(f'@Table(schema = "{model.schema}", name = "{model.original_name}")')
    # 복합키면 별도 Id 클래스 필요
    if model.has_composite_key:
        lines.append(f"@IdClass({model.type_name}Id.class)")
    lines.append(f"public class {model.type_name} implements Serializable {{")
    lines.append("")
    lines.append(f"{ind}@Serial")
    lines.append(f"{ind}private static final long serialVersionUID = 1L;")

    for col in model.columns:
        lines.append("")
        lines.extend(field_lines(col, ind))

    lines.append("}")
    lines.append("")
    return "\n".join(lines)
