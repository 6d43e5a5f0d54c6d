from __future__ import annotations
from pathlib import Path
from typing import List

from entity_agent.config import GeneratorConfig
from entity_agent.dto_writer import render_dto
from entity_agent.entity_writer import render_entity
from entity_agent.model import ArtifactKind, RenderedArtifact, TableModel

SEPARATOR = "=" * 30


def build_artifacts(model: TableModel, config: GeneratorConfig) -> List[RenderedArtifact]:
    out = config.output
    entity_name = f"{model.type_name}.{out.entity_suffix.lstrip('.')}"
    dto_name = f"{model.type_name}{out.dto_suffix}"
    return [
        RenderedArtifact(ArtifactKind.ENTITY, entity_name, render_entity(model, config)),
        RenderedArtifact(ArtifactKind.DTO, dto_name, render_dto(model, config)),
    ]


def combined_text(artifacts: List[RenderedArtifact]) -> str:
    return f"\n\n{SEPARATOR}\n\n".join(a.body for a in artifacts)


def write_artifacts(artifacts: List[RenderedArtifact], out_dir: Path) -> List[Path]:
    out_dir.mkdir(parents=True, exist_ok=True)
    paths = []
    for a in artifacts:
        p = out_dir / a.file_name
        p.write_text(a.body, encoding="utf-8")
        paths.append(p)
    return paths
