from .compress import ABSENT, compress
from .file_loader import read_ddl_file
from .logger import setup_logger

__all__ = [
    "ABSENT",
    "compress",
    "read_ddl_file",
    "setup_logger",
]
