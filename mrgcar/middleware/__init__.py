# mrgcar/middleware/__init__.py
from .request_logger import REQUEST_ID_HEADER, init_request_logger

__all__ = ["REQUEST_ID_HEADER", "init_request_logger"]
