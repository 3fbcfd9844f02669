"""
환경 변수 기반 설정
.env 파일이 있으면 먼저 로드합니다. 값이 잘못되면 기본값을 사용합니다.
"""
import logging
import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_INDENT = 2


def _get_log_level(name: str, default: str) -> str:
    level = os.getenv(name, default).strip().upper()
    if isinstance(logging.getLevelName(level), int):
        return level
    return default


def _get_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


LOG_LEVEL = _get_log_level("DDL_JSON_LOG_LEVEL", DEFAULT_LOG_LEVEL)
OUTPUT_INDENT = _get_int("DDL_JSON_INDENT", DEFAULT_INDENT)
OUTPUT_FORMAT = os.getenv("DDL_JSON_OUTPUT_FORMAT", "json").lower()
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "DDL_JSON_CORS_ORIGINS", "http://localhost:3000,http://localhost:5173"
    ).split(",")
    if origin.strip()
]
