"""
Logging setup shared by the bootstrap and the server.

Everything goes through loguru. uvicorn and asyncio still log through the
standard library, so their records are forwarded into loguru as well; that way
there is a single format and a single level switch.
"""
import inspect
import logging
import sys

from loguru import logger

# Loggers uvicorn configures on its own unless told otherwise
_STDLIB_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "asyncio")


class InterceptHandler(logging.Handler):
    """Re-emits stdlib `logging` records through loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Walk out of the logging module so loguru reports the real caller
        frame, depth = inspect.currentframe(), 0
        while frame is not None and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def configure_logging(level: str = "INFO", serialize: bool = False) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level, serialize=serialize, backtrace=False)

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in _STDLIB_LOGGERS:
        stdlib_logger = logging.getLogger(name)
        stdlib_logger.handlers = []
        stdlib_logger.propagate = True

    logger.debug(f"Logging configured level={level} serialize={serialize}")
