from __future__ import annotations
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from rich.console import Console
from rich.markup import escape

console = Console(stderr=True)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    input_file: Path = Field(default=Path("ddl.txt"), alias="ENTITY_INPUT_FILE")
    config_file: Path = Field(default=Path("entity-agent.json"), alias="ENTITY_CONFIG_FILE")
    output_dir: Path | None = Field(default=None, alias="ENTITY_OUTPUT_DIR")


settings = Settings()


class _Rules(BaseModel):
    # 파일 키는 camelCase, 코드에서는 snake_case 이름으로도 생성 가능
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class NamingRules(_Rules):
    known_prefixes: tuple[str, ...] = Field(
        default=("nr", "cd", "ds", "dt", "fl", "vl", "nm", "tp"), alias="knownPrefixes"
    )
    table_prefixes: tuple[str, ...] = Field(default=("tb",), alias="tablePrefixes")
    strip_three_letter_prefix: bool = Field(default=True, alias="stripThreeLetterPrefix")


class NumberTypeRules(_Rules):
    tokens: tuple[str, ...] = ("NUMBER",)
    default_type: str = Field(default="Integer", alias="defaultType")
    large_threshold: int = Field(default=9, alias="largeThreshold")
    large_type: str = Field(default="Long", alias="largeType")
    decimal_type: str = Field(default="BigDecimal", alias="decimalType")


class StringTypeRules(_Rules):
    target_type: str = Field(default="String", alias="type")
    tokens: tuple[str, ...] = ("CHAR", "VARCHAR2", "TEXT")


class DateTypeRules(_Rules):
    target_type: str = Field(default="LocalDateTime", alias="type")
    tokens: tuple[str, ...] = ("DATE", "TIMESTAMP")


class TypeMappingRules(_Rules):
    number: NumberTypeRules = Field(default_factory=NumberTypeRules)
    string: StringTypeRules = Field(default_factory=StringTypeRules)
    date: DateTypeRules = Field(default_factory=DateTypeRules)


class ValidationRules(_Rules):
    enabled: bool = True
    string_marker: str = Field(default="@NotBlank", alias="stringMarker")
    other_marker: str = Field(default="@NotNull", alias="otherMarker")
    schema_annotation: bool = Field(default=True, alias="schemaAnnotation")


class OutputRules(_Rules):
    directory: Path = Path("./out")
    entity_suffix: str = Field(default="java", alias="entitySuffix")
    dto_suffix: str = Field(default="DTO.java", alias="dtoSuffix")
    indent: str = "    "


class GeneratorConfig(_Rules):
    """
    생성 규칙 전체. 실행 시 한 번 로드되고 이후 변경되지 않는다.
    모든 변환 함수는 이 객체를 인자로 받는다.
    """
    naming: NamingRules = Field(default_factory=NamingRules)
    type_mapping: TypeMappingRules = Field(default_factory=TypeMappingRules, alias="typeMapping")
    validation: ValidationRules = Field(default_factory=ValidationRules)
    output: OutputRules = Field(default_factory=OutputRules)


def load_config(path: Path | None = None) -> GeneratorConfig:
    """
    JSON 설정 파일을 읽는다.
    - 파일이 없으면 경고 후 기본값
    - 읽기/파싱/검증 실패 시 경고 후 기본값 (치명적 오류 아님)
    """
    cfg_path = path or settings.config_file
    if not cfg_path.exists():
        console.print(f"[yellow]Config file {escape(str(cfg_path))} not found, using built-in defaults[/yellow]")
        return GeneratorConfig()

    try:
        raw = cfg_path.read_text(encoding="utf-8")
        return GeneratorConfig.model_validate_json(raw)
    except (OSError, ValueError) as e:
        # pydantic ValidationError / UnicodeDecodeError 모두 ValueError 계열
        console.print(f"[yellow]Invalid config {escape(str(cfg_path))}, falling back to defaults:[/yellow] {escape(str(e))}")
        return GeneratorConfig()
