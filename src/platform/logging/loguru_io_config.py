from contextvars import ContextVar
from datetime import datetime
from enum import StrEnum
import logging
import os
import sys

from loguru import logger as loguru_logger

from src.platform.config.core_setting import settings
from src.platform.constant.path import LOG_DIR
from src.platform.logging.service_context import get_service_context


# Use test log directory if in test environment
LOG_DIR = os.environ.get('TEST_LOG_DIR', LOG_DIR)


# Constants and shared variables for LoguruIO
SENSITIVE_KEYWORDS = {
    'session_id',
    'sessionId',
}

chain_start_time_var: ContextVar[float] = ContextVar('first_time_var', default=0)
call_depth_var: ContextVar[int] = ContextVar('call_depth_var', default=0)


class ExtraField(StrEnum):
    SERVICE_CONTEXT = 'service_context'
    CHAIN_START_TIME = 'chain_start_time'
    CALL_TARGET = 'call_target'


_DEFAULT_EXTRA = {
    ExtraField.SERVICE_CONTEXT: get_service_context(),
    ExtraField.CHAIN_START_TIME: '',
    ExtraField.CALL_TARGET: '',
}


class InterceptHandler(logging.Handler):
    def emit(self, record: logging.LogRecord) -> None:
        # Get corresponding Loguru level if it exists
        try:
            level: str | int = loguru_logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore
            depth += 1

        loguru_logger.bind(**_DEFAULT_EXTRA).opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


# Log format for LoguruIO decorated functions
io_log_format = ' | '.join(
    (
        f'<c>{{extra[{ExtraField.SERVICE_CONTEXT}]}}</>',
        '<lvl>{level:<8}</>',
        f'<c>{{file}}::{{function}}:{{line}}</>=><y>{{extra[{ExtraField.CALL_TARGET}]}}</>',
        '{message}',
        '<lk>{elapsed}</>',
        f'<lk>{{extra[{ExtraField.CHAIN_START_TIME}]:<18}}</>',
    )
)


custom_logger = loguru_logger.bind(**_DEFAULT_EXTRA)


def configure_logging() -> None:
    """
    Install the seating log format and route stdlib logging through loguru.

    Importing the library leaves the host's logging untouched; applications
    and the test suite opt in by calling this once at startup. Calling it
    again replaces the sinks instead of duplicating them.
    """
    loguru_logger.remove()  # Drop existing sinks to avoid duplicate output

    # Determine minimum log level based on DEBUG setting
    min_log_level = 'DEBUG' if settings.DEBUG else 'INFO'

    custom_logger.add(sys.stdout, format=io_log_format, level=min_log_level)

    if settings.LOG_TO_FILE:
        log_filename = (
            f'test_{datetime.now().strftime("%Y-%m-%d_%H")}.log'
            if os.environ.get('TEST_LOG_DIR')
            else f'{datetime.now().strftime("%Y-%m-%d_%H")}.log'
        )
        custom_logger.add(
            f'{LOG_DIR}/{log_filename}',
            format=io_log_format,
            rotation='1 hour',
            retention='7 days',
            compression='gz',
            enqueue=True,
            level=min_log_level,
        )

    # Intercept standard logging -> loguru
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
