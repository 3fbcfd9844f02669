"""
라인 단위 상태 머신 DDL 파서
PostgreSQL 덤프 형식(한 줄에 한 문장/절)의 DDL을 스키마 객체 목록으로 변환합니다.

**역할**: 최선 노력(best-effort) 파싱
- 인식하지 못한 줄은 조용히 무시
- 알 수 없는 테이블을 가리키는 COMMENT는 경고 후 버림
- 결과는 compress()로 빈 값을 제거한 뒤 반환
"""

from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from ddl_json.parser.line_patterns import (
    NONE_STATE_MATCHERS,
    TABLE_STATE_MATCHERS,
    ColumnMatch,
    CommentMatch,
    ForeignKeyMatch,
    IndexMatch,
    PrimaryKeyMatch,
    SchemaMatch,
    SequenceMatch,
    TableEndMatch,
    TableMatch,
    split_line,
)
from ddl_json.types.ddl_types import (
    ColumnDef,
    ForeignKey,
    IndexDef,
    PrimaryKey,
    SchemaObject,
    SequenceRecord,
    TableRecord,
)
from ddl_json.utils.compress import compress
from ddl_json.utils.logger import setup_logger

logger = setup_logger("ddl_state_machine")


class DDLParserError(Exception):
    """DDL 파서 내부 오류의 기본 예외"""
    pass


class InvalidParserStateError(DDLParserError):
    """정의되지 않은 파서 상태 (사용자 입력이 아닌 상태 머신 회귀)"""
    pass


class ParserState(Enum):
    NONE = "NONE"
    TABLE = "TABLE"


class DDLStateMachine:
    """
    DDL 상태 머신

    parse() 호출마다 상태, 테이블 lookup, 결과 목록을 새로 만들기 때문에
    호출 간에 공유되는 가변 상태는 없습니다.
    """

    def __init__(self):
        self._matchers = {
            ParserState.NONE: NONE_STATE_MATCHERS,
            ParserState.TABLE: TABLE_STATE_MATCHERS,
        }
        self._handlers: Dict[type, Callable[[Any, Optional[str]], None]] = {
            SchemaMatch: self._on_schema,
            SequenceMatch: self._on_sequence,
            TableMatch: self._on_table,
            CommentMatch: self._on_comment,
            PrimaryKeyMatch: self._on_primary_key,
            ForeignKeyMatch: self._on_foreign_key,
            IndexMatch: self._on_index,
            TableEndMatch: self._on_table_end,
            ColumnMatch: self._on_column,
        }
        self._reset()

    def _reset(self) -> None:
        self.state = ParserState.NONE
        self.schema_name = ""
        self.current_table: Optional[TableRecord] = None
        self.records: List[SchemaObject] = []
        self.table_lookup: Dict[str, TableRecord] = {}
        self.warnings: List[str] = []

    def parse(self, ddl_text: str) -> Any:
        """
        DDL 텍스트를 파싱하여 압축된 스키마 객체 목록을 반환합니다.

        Args:
            ddl_text: DDL SQL 텍스트

        Returns:
            dict 목록, 인식된 객체가 하나도 없으면 ABSENT

        Raises:
            InvalidParserStateError: 상태 값이 정의된 집합을 벗어난 경우
        """
        records = self.parse_records(ddl_text)
        return compress([record.to_dict() for record in records])

    def parse_records(self, ddl_text: str) -> List[SchemaObject]:
        """압축 전의 dataclass 레코드 목록을 반환합니다."""
        self._reset()

        for raw_line in ddl_text.split("\n"):
            line, trailing_comment = split_line(raw_line)
            if not line:
                continue
            self._feed(line, trailing_comment)

        if self.current_table is not None:
            logger.debug("닫히지 않은 테이블 정의 무시: %s", self.current_table.name)

        sequences = sum(1 for record in self.records if isinstance(record, SequenceRecord))
        logger.info(
            "DDL 파싱 완료: 테이블 %d개, 시퀀스 %d개",
            len(self.records) - sequences,
            sequences,
        )
        return self.records

    def _feed(self, line: str, trailing_comment: Optional[str]) -> None:
        matchers = self._matchers.get(self.state)
        if matchers is None:
            raise InvalidParserStateError(f"Unknown state: {self.state}")

        for matcher in matchers:
            result = matcher(line)
            if result is not None:
                self._handlers[type(result)](result, trailing_comment)
                return

    # ------------------------------------------------------------------
    # NONE 상태
    # ------------------------------------------------------------------

    def _on_schema(self, match: SchemaMatch, trailing_comment: Optional[str]) -> None:
        self.schema_name = match.schema

    def _on_sequence(self, match: SequenceMatch, trailing_comment: Optional[str]) -> None:
        self.records.append(SequenceRecord(
            schema=self.schema_name,
            name=match.name,
            trailing_comment=trailing_comment,
        ))

    def _on_table(self, match: TableMatch, trailing_comment: Optional[str]) -> None:
        self.current_table = TableRecord(
            schema=self.schema_name,
            name=match.name,
            trailing_comment=trailing_comment,
        )
        if match.name in self.table_lookup:
            logger.debug("테이블명 중복, 마지막 정의로 대체: %s", match.name)
        self.table_lookup[match.name] = self.current_table
        self.state = ParserState.TABLE

    def _on_comment(self, match: CommentMatch, trailing_comment: Optional[str]) -> None:
        table = self.table_lookup.get(match.table)
        if table is None:
            logger.warning("Comment references unknown table '%s'", match.table)
            self.warnings.append(f"Comment references unknown table '{match.table}'")
            return
        table.comments[match.column] = match.text

    # ------------------------------------------------------------------
    # TABLE 상태
    # ------------------------------------------------------------------

    def _on_primary_key(self, match: PrimaryKeyMatch, trailing_comment: Optional[str]) -> None:
        self.current_table.constraints.append(PrimaryKey(
            index_name=match.index_name,
            columns=match.columns,
        ))

    def _on_foreign_key(self, match: ForeignKeyMatch, trailing_comment: Optional[str]) -> None:
        self.current_table.constraints.append(ForeignKey(
            index_name=match.index_name,
            columns=match.columns,
            rule=match.rule,
        ))

    def _on_index(self, match: IndexMatch, trailing_comment: Optional[str]) -> None:
        self.current_table.indexes.append(IndexDef(
            name=match.name,
            kind="unique" if match.unique else "btree",
        ))

    def _on_table_end(self, match: TableEndMatch, trailing_comment: Optional[str]) -> None:
        self.records.append(self.current_table)
        self.current_table = None
        self.state = ParserState.NONE

    def _on_column(self, match: ColumnMatch, trailing_comment: Optional[str]) -> None:
        self.current_table.columns.append(ColumnDef(
            name=match.name,
            type=match.type,
            constraints=["NOT NULL"] if match.not_null else [],
            default_value=match.default_value,
            trailing_comment=trailing_comment,
        ))


def parse_ddl(ddl_text: str) -> Any:
    """
    DDL 텍스트를 파싱합니다. DDLStateMachine().parse()의 단축 함수입니다.
    """
    return DDLStateMachine().parse(ddl_text)
