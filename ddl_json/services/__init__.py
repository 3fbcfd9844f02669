"""DDL services module"""

from ddl_json.services.ddl_service import (
    parse_ddl_file_service,
    parse_ddl_text_service,
)

__all__ = [
    "parse_ddl_file_service",
    "parse_ddl_text_service",
]
