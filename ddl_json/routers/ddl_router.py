"""
DDL 파싱 router
"""
from fastapi import APIRouter, HTTPException

from ddl_json.dto.ddl_dto import DDLParseResponse, DDLPathRequest, DDLTextRequest
from ddl_json.parser.ddl_state_machine import DDLParserError
from ddl_json.services.ddl_service import parse_ddl_file_service, parse_ddl_text_service
from ddl_json.utils.logger import setup_logger


logger = setup_logger("ddl_router")
router = APIRouter(prefix="/ddl", tags=["ddl"])


@router.post("/parse", response_model=DDLParseResponse)
async def parse_ddl_api(request: DDLTextRequest):
    """
    DDL 텍스트를 JSON 스키마 객체 목록으로 변환하는 엔드포인트입니다.
    """
    try:
        return await parse_ddl_text_service(request.ddl)
    except DDLParserError as e:
        logger.error("Failed to parse DDL: %s", str(e))
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/parse_file", response_model=DDLParseResponse)
async def parse_ddl_file_api(request: DDLPathRequest):
    """
    서버 로컬 DDL 파일을 읽어 변환하는 엔드포인트입니다.
    """
    try:
        result = await parse_ddl_file_service(request.path)
        logger.info("Successfully parsed DDL file: %s", request.path)
        return result
    except FileNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except DDLParserError as e:
        logger.error("Failed to parse DDL file: %s", str(e))
        raise HTTPException(status_code=500, detail=str(e))
