"""
Test Configuration

Environment setup must happen before application imports: the settings
object is built at import time and read by the loguru sinks.
"""

import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)
    os.environ.setdefault('DEBUG', 'true')
    os.environ.setdefault('LOG_TO_FILE', 'false')


_early_setup_test_environment()

from src.platform.logging.loguru_io_config import configure_logging  # noqa: E402


configure_logging()
