from ddl_json.types.ddl_types import (
    ColumnDef,
    ConstraintDef,
    ForeignKey,
    IndexDef,
    PrimaryKey,
    SchemaObject,
    SequenceRecord,
    TableRecord,
)

__all__ = [
    "ColumnDef",
    "ConstraintDef",
    "ForeignKey",
    "IndexDef",
    "PrimaryKey",
    "SchemaObject",
    "SequenceRecord",
    "TableRecord",
]
