from pathlib import Path

from ddl_json.utils.logger import setup_logger


logger = setup_logger("file_loader")


def read_ddl_file(ddl_path: str) -> str:
    """
    DDL SQL 파일을 UTF-8 텍스트로 읽어 반환합니다.

    Raises:
        FileNotFoundError: DDL 파일이 없는 경우
    """
    path = Path(ddl_path)
    if not path.is_file():
        raise FileNotFoundError(f"File '{ddl_path}' does not exist.")

    logger.info("DDL 파일 로드: %s", ddl_path)
    with open(path, "r", encoding="utf-8") as f:
        return f.read()
