"""
ddl2json
DDL SQL 스크립트를 스키마/시퀀스/테이블 구조의 JSON 문서로 변환합니다.
"""

from ddl_json.parser import DDLStateMachine, parse_ddl
from ddl_json.utils.compress import ABSENT, compress

__version__ = "0.1.0"

__all__ = [
    "ABSENT",
    "DDLStateMachine",
    "compress",
    "parse_ddl",
]
