from ddl_json.dto.ddl_dto import DDLParseResponse, DDLPathRequest, DDLTextRequest

__all__ = [
    "DDLParseResponse",
    "DDLPathRequest",
    "DDLTextRequest",
]
