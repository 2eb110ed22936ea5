import logging
import sys
from pathlib import Path

from loguru import logger

from pcli.core.models.config import LoggerConfig

CONSOLE_FORMAT = "<level>{level: <8}</level> | <cyan>{name}</cyan> - <level>{message}</level>"


class InterceptHandler(logging.Handler):
    """
    Intercepts standard logging and forwards it to Loguru with proper context.
    """

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def setup_logging(config: LoggerConfig) -> None:
    """
    Configures logging for both stdlib and Loguru.

    Console output goes to stderr so that command output on stdout stays clean.
    """
    log_level = str(config.level)

    # Remove handlers from root logger and set level
    logging.root.handlers = [InterceptHandler()]
    logging.root.setLevel(log_level)

    # Remove all other loggers' handlers and propagate to root
    for name in logging.root.manager.loggerDict.keys():
        log = logging.getLogger(name)
        log.handlers.clear()
        log.propagate = True

    handlers = []

    # Console output
    handlers.append({
        "sink": sys.stderr,
        "level": log_level,
        "serialize": config.json_log,
        "backtrace": True,
        "diagnose": log_level == "DEBUG",
        "format": CONSOLE_FORMAT,
    })

    # Optional file output
    if config.log_file:
        log_file = Path(config.log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        handlers.append({
            "sink": str(log_file),
            "level": log_level,
            "serialize": config.json_log,
            "rotation": "10 MB",
            "retention": "30 days",
            "compression": "zip",
            "encoding": "utf-8",
            "backtrace": False,
            "diagnose": False,
            "format": "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | {name}:{function}:{line} - {message}",
        })

    logger.configure(handlers=handlers)
    logger.debug("Logging initialized.")
