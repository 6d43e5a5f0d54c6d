"""
CREATE TABLE DDL 파서 (라인 단위, 정규식 기반)

- 한 문장(한 테이블)만 처리
- 해석할 수 없는 라인은 조용히 건너뛴다
- 테이블명을 못 찾으면 placeholder(dbo / Unknown)를 사용
"""
from __future__ import annotations
import re
from typing import Iterator, List, Optional, Set, Tuple

from entity_agent.config import GeneratorConfig
from entity_agent.model import Column, TableModel, DEFAULT_SCHEMA, UNKNOWN_TABLE
from entity_agent.naming import to_accessor_name, to_field_name, to_type_name
from entity_agent.type_mapper import map_type

_IF_NOT_EXISTS = r"(?:IF\s+NOT\s+EXISTS\s+)?"

TABLE_WITH_SCHEMA_PATTERN = re.compile(
    r"CREATE\s+TABLE\s+" + _IF_NOT_EXISTS + r"(\w+)\.(\w+)", re.IGNORECASE
)
TABLE_PATTERN = re.compile(r"CREATE\s+TABLE\s+" + _IF_NOT_EXISTS + r"(\w+)", re.IGNORECASE)

PRIMARY_KEY_PATTERN = re.compile(r"PRIMARY\s+KEY\s*\(([^)]+)\)", re.IGNORECASE)

# NAME TYPE[(precision[, scale][ BYTE|CHAR])]
COLUMN_PATTERN = re.compile(
    r"^(\w+)\s+(\w+)"
    r"(?:\s*\(\s*(\d+)\s*(?:,\s*(\d+)\s*)?(?:\s+(?:BYTE|CHAR)\s*)?\))?",
    re.IGNORECASE,
)

# 컬럼 정의 뒤에 붙은 PRIMARY KEY (괄호 목록이 없는 컬럼 레벨 제약)
INLINE_PRIMARY_KEY_PATTERN = re.compile(r"\bPRIMARY\s+KEY\b(?!\s*\()", re.IGNORECASE)

LEADING_WORD_PATTERN = re.compile(r"\w+")

SKIP_KEYWORDS = {
    "CONSTRAINT", "CREATE", "KEY", "PRIMARY", "UNIQUE", "FOREIGN", "CHECK", "INDEX",
    "REFERENCES", "USING", "TABLESPACE",
}


class DDLParser:
    def __init__(self, config: GeneratorConfig):
        self.config = config

    def parse(self, text: str) -> TableModel:
        ddl = text.replace('"', "")
        schema, table = self.parse_table_name(ddl)
        pk_names = self.parse_primary_keys(ddl)
        columns, duplicates = self.parse_columns(ddl, pk_names)
        return TableModel(
            schema=schema,
            original_name=table,
            type_name=to_type_name(table, self.config),
            columns=tuple(columns),
            duplicate_columns=tuple(duplicates),
        )

    def parse_table_name(self, ddl: str) -> Tuple[str, str]:
        m = TABLE_WITH_SCHEMA_PATTERN.search(ddl)
        if m:
            return m.group(1), m.group(2)
        m = TABLE_PATTERN.search(ddl)
        if m:
            return DEFAULT_SCHEMA, m.group(1)
        return DEFAULT_SCHEMA, UNKNOWN_TABLE

    def parse_primary_keys(self, ddl: str) -> List[str]:
        # 첫 번째 PRIMARY KEY (...) 절만 사용
        m = PRIMARY_KEY_PATTERN.search(ddl)
        if not m:
            return []
        return [name.strip() for name in m.group(1).split(",") if name.strip()]

    def body_lines(self, ddl: str) -> Iterator[str]:
        """
        컬럼 정의가 올 수 있는 라인만 돌려준다 (괄호 깊이 1, 본문이 없으면 깊이 0).
        - 첫 컬럼이 "(" 뒤에 붙은 export 형식 / 선행 콤마 스타일 처리
        - STORAGE(...) 안쪽 라인(PCTINCREASE 0 ...)은 깊이 2라서 제외
        - 본문을 닫는 ")" 이후 storage 절(PCTFREE, NOCOMPRESS ...)은 보지 않는다
        """
        depth = 0
        opened = False
        for line in ddl.splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith("--"):
                continue

            while stripped.startswith("("):
                depth += 1
                stripped = stripped[1:].lstrip()

            line_depth = depth
            at_column_level = line_depth == 1 or (line_depth == 0 and not opened)
            depth += stripped.count("(") - stripped.count(")")
            opened = opened or line_depth > 0 or depth > 0

            if at_column_level and not stripped.startswith(")"):
                yield stripped.lstrip(",").lstrip()

            if opened and depth <= 0:
                break

    def parse_columns(self, ddl: str, pk_names: List[str]) -> Tuple[List[Column], List[str]]:
        columns: List[Column] = []
        duplicates: List[str] = []
        seen: Set[str] = set()

        for stripped in self.body_lines(ddl):
            if self._should_skip(stripped):
                continue

            m = COLUMN_PATTERN.match(stripped)
            if not m:
                continue

            name = m.group(1)
            if name in seen:
                duplicates.append(name)
                continue
            seen.add(name)

            is_id = name in pk_names or bool(INLINE_PRIMARY_KEY_PATTERN.search(stripped[m.end():]))
            columns.append(self._build_column(name, m.group(2), m.group(3), m.group(4), is_id))

        return columns, duplicates

    def _should_skip(self, stripped: str) -> bool:
        if not stripped or stripped.startswith("--"):
            return True
        word = LEADING_WORD_PATTERN.match(stripped)
        return bool(word) and word.group(0).upper() in SKIP_KEYWORDS

    def _build_column(
        self,
        name: str,
        db_type: str,
        precision: Optional[str],
        scale: Optional[str],
        is_id: bool,
    ) -> Column:
        mapping = map_type(db_type, int(precision or 0), int(scale or 0), self.config)
        field_name = to_field_name(name, self.config)
        return Column(
            original_name=name,
            field_name=field_name,
            type_name=to_accessor_name(field_name),
            target_type=mapping.target_type,
            annotation=mapping.annotation,
            is_id=is_id,
        )


def parse_ddl(text: str, config: GeneratorConfig) -> TableModel:
    return DDLParser(config).parse(text)
