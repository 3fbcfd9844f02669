"""
DDL 파싱에 사용되는 데이터 타입 정의
to_dict()는 JSON 출력용 키(camelCase)로 변환합니다. 빈 값은 이후 compress 단계에서 제거됩니다.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union


@dataclass
class ColumnDef:
    """컬럼 정의"""
    name: str
    type: str
    constraints: List[str] = None  # 예: ["NOT NULL"]
    default_value: Optional[str] = None
    trailing_comment: Optional[str] = None

    def __post_init__(self):
        if self.constraints is None:
            self.constraints = []

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type,
            "constraints": list(self.constraints),
            "defaultValue": self.default_value,
            "trailingComment": self.trailing_comment,
        }


@dataclass
class PrimaryKey:
    """PRIMARY KEY 제약조건"""
    index_name: str
    columns: List[str] = None

    def __post_init__(self):
        if self.columns is None:
            self.columns = []

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "primary_key",
            "indexName": self.index_name,
            "columns": list(self.columns),
        }


@dataclass
class ForeignKey:
    """FOREIGN KEY 제약조건 (REFERENCES 이후 규칙은 원문 그대로 보관)"""
    index_name: str
    columns: List[str] = None
    rule: str = ""

    def __post_init__(self):
        if self.columns is None:
            self.columns = []

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "foreign_key",
            "indexName": self.index_name,
            "columns": list(self.columns),
            "rule": self.rule,
        }


ConstraintDef = Union[PrimaryKey, ForeignKey]


@dataclass
class IndexDef:
    """인덱스 정의 (컬럼 목록은 파싱하지 않음)"""
    name: str
    kind: str  # "unique" | "btree"
    columns: List[str] = None

    def __post_init__(self):
        if self.columns is None:
            self.columns = []

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "kind": self.kind,
            "columns": list(self.columns),
        }


@dataclass
class SequenceRecord:
    """시퀀스 정보"""
    schema: str
    name: str
    trailing_comment: Optional[str] = None
    type: str = "sequence"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "schema": self.schema,
            "type": self.type,
            "name": self.name,
            "trailingComment": self.trailing_comment,
        }


@dataclass
class TableRecord:
    """테이블 정보"""
    schema: str
    name: str
    columns: List[ColumnDef] = None
    constraints: List[ConstraintDef] = None
    indexes: List[IndexDef] = None
    comments: Dict[str, str] = None  # 컬럼명 -> 주석
    trailing_comment: Optional[str] = None
    type: str = "table"

    def __post_init__(self):
        if self.columns is None:
            self.columns = []
        if self.constraints is None:
            self.constraints = []
        if self.indexes is None:
            self.indexes = []
        if self.comments is None:
            self.comments = {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "schema": self.schema,
            "type": self.type,
            "name": self.name,
            "columns": [column.to_dict() for column in self.columns],
            "constraints": [constraint.to_dict() for constraint in self.constraints],
            "indexes": [index.to_dict() for index in self.indexes],
            "comments": dict(self.comments),
            "trailingComment": self.trailing_comment,
        }


SchemaObject = Union[SequenceRecord, TableRecord]
