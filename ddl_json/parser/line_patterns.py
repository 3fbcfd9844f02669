"""
DDL 라인 패턴 매처
각 매처는 전처리된 한 줄을 받아 타입이 지정된 매치 결과(NamedTuple) 또는 None을 반환합니다.

패턴끼리 서로 배타적이지 않으므로 상태별 매처 순서(NONE_STATE_MATCHERS, TABLE_STATE_MATCHERS)가 중요합니다.
예: "CONSTRAINT t_pkey PRIMARY KEY (id)"는 컬럼 패턴에도 걸릴 수 있으므로 컬럼 매처는 항상 마지막입니다.
"""

import re
from typing import List, NamedTuple, Optional, Tuple

from ddl_json.parser.name_resolver import split_qualified_name


# 점으로 구분된 (따옴표 허용) 식별자
_QUALIFIED = r'([\w."]+)'

SCHEMA_PATTERN = re.compile(r'^CREATE\s+SCHEMA\s+(?:IF\s+NOT\s+EXISTS\s+)?"?(\w+)"?', re.IGNORECASE)
SEQUENCE_PATTERN = re.compile(r'^CREATE\s+SEQUENCE\s+(?:IF\s+NOT\s+EXISTS\s+)?' + _QUALIFIED, re.IGNORECASE)
TABLE_PATTERN = re.compile(r'^CREATE\s+TABLE\s+(?:IF\s+NOT\s+EXISTS\s+)?' + _QUALIFIED, re.IGNORECASE)
COMMENT_PATTERN = re.compile(r"^COMMENT\s+ON\s+COLUMN\s+" + _QUALIFIED + r"\s+IS\s+'(.+)'", re.IGNORECASE)
PRIMARY_KEY_PATTERN = re.compile(
    r'^CONSTRAINT\s+"?(\w+)"?\s+PRIMARY\s+KEY\s*\(([\w, "]+)\)',
    re.IGNORECASE
)
FOREIGN_KEY_PATTERN = re.compile(
    r'^CONSTRAINT\s+"?(\w+)"?\s+FOREIGN\s+KEY\s*\(([\w, "]+)\)\s*(.*?)\s*,?\s*$',
    re.IGNORECASE
)
INDEX_PATTERN = re.compile(
    r'^CREATE\s+(UNIQUE\s+)?INDEX\s+(?:CONCURRENTLY\s+)?"?(\w+)"?\s+ON\s+(?:ONLY\s+)?' + _QUALIFIED,
    re.IGNORECASE
)
TABLE_END_PATTERN = re.compile(r'^\);')

# <name> <type>[(args)] [DEFAULT ...] [NOT NULL|NULL],
# 세 번째 그룹은 NOT NULL/NULL 뿐 아니라 인라인 DEFAULT 절도 함께 담습니다.
COLUMN_PATTERN = re.compile(
    r'^(?!(?:CONSTRAINT\s|PRIMARY\s+KEY\b|FOREIGN\s+KEY\b|UNIQUE\s*\(|CHECK\s*\('
    r'|EXCLUDE\s+(?:USING\b|\()|COMMENT\s+ON\b|CREATE\s))'
    r'"?(\w+)"?\s+'
    r'(.+?)'
    r'(\s+(?:DEFAULT|NOT\s+NULL|NULL)\b.*?)?'
    r'\s*,?\s*$',
    re.IGNORECASE
)
NOT_NULL_PATTERN = re.compile(r'NOT\s+NULL', re.IGNORECASE)
DEFAULT_PATTERN = re.compile(r'^\s*DEFAULT\s+(.*?)(?:\s+NULL)?\s*$', re.IGNORECASE)


class SchemaMatch(NamedTuple):
    schema: str


class SequenceMatch(NamedTuple):
    schema: str
    name: str


class TableMatch(NamedTuple):
    schema: str
    name: str


class CommentMatch(NamedTuple):
    schema: str
    table: str
    column: str
    text: str


class PrimaryKeyMatch(NamedTuple):
    index_name: str
    columns: List[str]


class ForeignKeyMatch(NamedTuple):
    index_name: str
    columns: List[str]
    rule: str


class IndexMatch(NamedTuple):
    name: str
    unique: bool
    schema: str
    table: str


class TableEndMatch(NamedTuple):
    pass


class ColumnMatch(NamedTuple):
    name: str
    type: str
    not_null: bool
    default_value: Optional[str]


def split_line(raw_line: str) -> Tuple[str, Optional[str]]:
    """
    한 줄을 본문과 `--` 이후의 trailing comment로 분리합니다.
    주석이 없거나 비어 있으면 trailing comment는 None입니다.
    """
    main, sep, comment = raw_line.partition("--")
    trailing = comment.strip() if sep else ""
    return main.strip(), trailing or None


def _split_columns(column_list: str) -> List[str]:
    return [col.strip().strip('"') for col in column_list.split(",") if col.strip()]


def match_schema(line: str) -> Optional[SchemaMatch]:
    m = SCHEMA_PATTERN.match(line)
    if not m:
        return None
    return SchemaMatch(schema=m.group(1))


def match_sequence(line: str) -> Optional[SequenceMatch]:
    m = SEQUENCE_PATTERN.match(line)
    if not m:
        return None
    name = split_qualified_name(m.group(1), "S.T")
    return SequenceMatch(schema=name.schema, name=name.table)


def match_table(line: str) -> Optional[TableMatch]:
    m = TABLE_PATTERN.match(line)
    if not m:
        return None
    name = split_qualified_name(m.group(1), "S.T")
    return TableMatch(schema=name.schema, name=name.table)


def match_comment(line: str) -> Optional[CommentMatch]:
    m = COMMENT_PATTERN.match(line)
    if not m:
        return None
    name = split_qualified_name(m.group(1), "S.T.C")
    return CommentMatch(
        schema=name.schema,
        table=name.table,
        column=name.column,
        text=m.group(2).replace("''", "'"),
    )


def match_primary_key(line: str) -> Optional[PrimaryKeyMatch]:
    m = PRIMARY_KEY_PATTERN.match(line)
    if not m:
        return None
    return PrimaryKeyMatch(index_name=m.group(1), columns=_split_columns(m.group(2)))


def match_foreign_key(line: str) -> Optional[ForeignKeyMatch]:
    m = FOREIGN_KEY_PATTERN.match(line)
    if not m:
        return None
    return ForeignKeyMatch(
        index_name=m.group(1),
        columns=_split_columns(m.group(2)),
        rule=m.group(3),
    )


def match_index(line: str) -> Optional[IndexMatch]:
    m = INDEX_PATTERN.match(line)
    if not m:
        return None
    name = split_qualified_name(m.group(3), "S.T")
    return IndexMatch(
        name=m.group(2),
        unique=bool(m.group(1)),
        schema=name.schema,
        table=name.table,
    )


def match_table_end(line: str) -> Optional[TableEndMatch]:
    if TABLE_END_PATTERN.match(line):
        return TableEndMatch()
    return None


def match_column(line: str) -> Optional[ColumnMatch]:
    m = COLUMN_PATTERN.match(line)
    if not m:
        return None

    name, col_type, tail = m.group(1), m.group(2).strip(), m.group(3) or ""
    not_null = bool(NOT_NULL_PATTERN.search(tail))

    default_value = None
    if not not_null:
        default_match = DEFAULT_PATTERN.match(tail)
        if default_match and default_match.group(1):
            default_value = default_match.group(1)

    return ColumnMatch(
        name=name,
        type=col_type,
        not_null=not_null,
        default_value=default_value,
    )


# 상태별 매처 (순서 중요)
NONE_STATE_MATCHERS = (
    match_schema,
    match_sequence,
    match_table,
    match_comment,
)

TABLE_STATE_MATCHERS = (
    match_primary_key,
    match_foreign_key,
    match_index,
    match_comment,
    match_table_end,
    match_column,
)
