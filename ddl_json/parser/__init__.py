"""
DDL 파서 모듈
라인 단위 상태 머신으로 DDL을 스키마 객체 목록으로 변환합니다.
"""

from ddl_json.parser.ddl_state_machine import (
    DDLParserError,
    DDLStateMachine,
    InvalidParserStateError,
    ParserState,
    parse_ddl,
)
from ddl_json.parser.name_resolver import QualifiedName, split_qualified_name

__all__ = [
    'DDLParserError',
    'DDLStateMachine',
    'InvalidParserStateError',
    'ParserState',
    'parse_ddl',
    'QualifiedName',
    'split_qualified_name',
]
