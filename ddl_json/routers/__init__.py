"""
Routers module
"""
from ddl_json.routers.ddl_router import router as ddl_router

__all__ = [
    "ddl_router",
]
