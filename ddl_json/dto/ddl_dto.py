"""
DDL 파싱 API DTO 정의
"""
from typing import Any, Dict, List

from pydantic import BaseModel, Field


class DDLTextRequest(BaseModel):
    """DDL 텍스트 파싱 요청"""
    ddl: str


class DDLPathRequest(BaseModel):
    """DDL 파일 경로 파싱 요청"""
    path: str


class DDLParseResponse(BaseModel):
    """DDL 파싱 응답 (인식된 객체가 없으면 objects는 빈 리스트)"""
    objects: List[Dict[str, Any]] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)
