"""DDL → JPA Entity + DTO 생성."""
from __future__ import annotations
from enum import Enum
from pathlib import Path
from typing import List

import typer

from entity_agent.artifacts import build_artifacts, combined_text, write_artifacts
from entity_agent.clipboard import copy_to_clipboard
from entity_agent.config import GeneratorConfig, console, settings
from entity_agent.model import RenderedArtifact
from entity_agent.parsers import parse_ddl


class OutputTarget(str, Enum):
    FILE = "file"
    CLIPBOARD = "clipboard"
    STDOUT = "stdout"


class InputFileError(RuntimeError):
    pass


def read_ddl(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputFileError(f"Cannot read input file {path}: {e}") from e


def run_generate(
    input_file: Path,
    config: GeneratorConfig,
    target: OutputTarget = OutputTarget.FILE,
    out_dir: Path | None = None,
) -> List[RenderedArtifact]:
    """
    입력 DDL을 읽어 Entity/DTO를 만들고 target으로 내보낸다.
    반환: 생성된 artifact 목록 [entity, dto]
    """
    return generate_from_text(read_ddl(input_file), config, target=target, out_dir=out_dir)


def generate_from_text(
    ddl: str,
    config: GeneratorConfig,
    target: OutputTarget = OutputTarget.FILE,
    out_dir: Path | None = None,
) -> List[RenderedArtifact]:
    """이미 읽은 DDL 텍스트로 생성/출력 (CLI는 입력을 먼저 읽고 target을 묻는다)"""
    model = parse_ddl(ddl, config)

    console.print(f"[bold]Table:[/bold] {model.schema}.{model.original_name} -> {model.type_name}")
    console.print(
        f"Found [green]{len(model.columns)}[/green] columns, "
        f"[green]{len(model.id_columns)}[/green] primary key column(s)"
    )
    if not model.columns:
        console.print("[yellow]No column definitions found in input[/yellow]")
    if model.duplicate_columns:
        dups = ", ".join(model.duplicate_columns)
        console.print(f"[yellow]Duplicate columns ignored (first declaration kept):[/yellow] {dups}")

    artifacts = build_artifacts(model, config)

    if target is OutputTarget.FILE:
        base = out_dir or settings.output_dir or config.output.directory
        for p in write_artifacts(artifacts, base):
            console.print(f"[bold green]Wrote:[/bold green] {p}")
        return artifacts

    text = combined_text(artifacts)
    if target is OutputTarget.CLIPBOARD and copy_to_clipboard(text):
        console.print("[bold green]Copied to clipboard[/bold green]")
        return artifacts

    typer.echo(text)
    return artifacts
