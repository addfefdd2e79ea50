import inspect
import logging
import sys

from loguru import logger

from questboard.core.config import settings


class InterceptHandler(logging.Handler):
    """Forward records from the standard logging module (uvicorn, httpx) to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = inspect.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(log_file: str) -> None:
    level = "DEBUG" if settings.is_dev else settings.log_level

    logger.remove()
    logger.add(sys.stderr, level=level)
    logger.add(log_file, level=level, rotation="2 MB", retention="1 week", encoding="utf-8")

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        std_logger = logging.getLogger(name)
        std_logger.handlers = [InterceptHandler()]
        std_logger.propagate = False
