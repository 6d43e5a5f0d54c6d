"""
DDL → Java 코드 생성 CLI.

  entity-agent ddl.txt --target file
  entity-agent ddl.txt -t stdout -c entity-agent.json
  entity-agent                      (ENTITY_INPUT_FILE, 출력 방식은 프롬프트로 선택)
"""
from __future__ import annotations
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape
from rich.prompt import Prompt

from entity_agent.commands.generate import InputFileError, OutputTarget, generate_from_text, read_ddl
from entity_agent.config import console, load_config, settings

app = typer.Typer(
    name="entity-agent",
    add_completion=False,
    help="CREATE TABLE DDL에서 JPA Entity와 DTO 코드를 생성",
)


def _ask_target() -> OutputTarget:
    choice = Prompt.ask(
        "Output",
        choices=[t.value for t in OutputTarget],
        default=OutputTarget.FILE.value,
        console=console,
    )
    return OutputTarget(choice)


@app.command()
def generate(
    input_file: Optional[Path] = typer.Argument(None, help="DDL 파일 (기본: ENTITY_INPUT_FILE 또는 ddl.txt)"),
    config_file: Optional[Path] = typer.Option(None, "--config", "-c", help="JSON 설정 파일"),
    target: Optional[OutputTarget] = typer.Option(
        None, "--target", "-t", case_sensitive=False, help="출력 방식 (생략 시 프롬프트)"
    ),
    out_dir: Optional[Path] = typer.Option(None, "--out-dir", "-o", help="파일 출력 디렉터리"),
):
    """DDL 한 문장을 읽어 Entity/DTO 생성."""
    config = load_config(config_file)
    path = input_file or settings.input_file

    try:
        ddl = read_ddl(path)
    except InputFileError as e:
        console.print(f"[bold red]{escape(str(e))}[/bold red]")
        raise typer.Exit(code=1)

    # 입력을 읽은 뒤에만 출력 방식을 묻는다
    if target is None:
        target = _ask_target()

    generate_from_text(ddl, config, target=target, out_dir=out_dir)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
