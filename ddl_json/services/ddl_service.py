import asyncio

from ddl_json.dto.ddl_dto import DDLParseResponse
from ddl_json.parser.ddl_state_machine import DDLStateMachine
from ddl_json.utils.compress import ABSENT
from ddl_json.utils.file_loader import read_ddl_file
from ddl_json.utils.logger import setup_logger


logger = setup_logger("ddl_service")


def _parse_to_response(ddl_text: str) -> DDLParseResponse:
    machine = DDLStateMachine()
    result = machine.parse(ddl_text)
    if result is ABSENT:
        logger.info("인식된 스키마 객체 없음")
        result = []
    return DDLParseResponse(objects=result, warnings=machine.warnings)


async def parse_ddl_text_service(ddl_text: str) -> DDLParseResponse:
    """
    DDL 텍스트를 파싱하는 서비스입니다.
    """
    logger.info("DDL 텍스트 파싱 요청: %d bytes", len(ddl_text))

    # CPU 바운드 작업이므로 executor에서 실행
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, lambda: _parse_to_response(ddl_text))


async def parse_ddl_file_service(path: str) -> DDLParseResponse:
    """
    DDL SQL 파일을 읽어 파싱하는 서비스입니다.

    Raises:
        FileNotFoundError: 파일이 없는 경우
    """
    logger.info("DDL 파일 파싱 요청: %s", path)

    loop = asyncio.get_running_loop()
    try:
        ddl_text = await loop.run_in_executor(None, lambda: read_ddl_file(path))
    except FileNotFoundError as e:
        logger.error("DDL 파일 없음: %s", str(e))
        raise e

    return await loop.run_in_executor(None, lambda: _parse_to_response(ddl_text))
