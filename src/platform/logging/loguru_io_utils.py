from inspect import getfile, getsourcelines
from os.path import basename
from time import time
from typing import Any, Callable

from src.platform.logging.loguru_io_config import (
    SENSITIVE_KEYWORDS,
    call_depth_var,
    chain_start_time_var,
)


MAX_CONTENT_LENGTH = 500
MAX_SEQUENCE_ITEMS = 5


def get_chain_start_time() -> float:
    if not (start_time := chain_start_time_var.get()):
        start_time = time()
        chain_start_time_var.set(start_time)
    return start_time


def build_call_target_func_path(func: Callable[..., Any]) -> str:
    target = getattr(func, '__func__', func)
    try:
        lineno = getsourcelines(target)[1]
    except (OSError, TypeError):
        lineno = 0
    return f'{basename(getfile(target))}::{func.__qualname__}:{lineno}'


def reset_call_depth() -> None:
    layer = call_depth_var.get() - 1
    call_depth_var.set(layer)
    if not layer:
        chain_start_time_var.set(0)


def should_mask_keyword(keyword: Any, value: Any) -> Any:
    return '********' if keyword in SENSITIVE_KEYWORDS else value


def mask_sensitive(data: Any) -> Any:
    if isinstance(data, dict):
        return {key: mask_sensitive(should_mask_keyword(key, value)) for key, value in data.items()}
    if isinstance(data, list | tuple):
        return type(data)(mask_sensitive(item) for item in data)
    return data


def truncate_content(data: Any) -> Any:
    # Seat layouts routinely carry hundreds of records
    if isinstance(data, list | tuple) and len(data) > MAX_SEQUENCE_ITEMS:
        return f'<{type(data).__name__} of {len(data)} items>'
    content = str(data)
    if len(content) > MAX_CONTENT_LENGTH:
        hidden = len(content) - MAX_CONTENT_LENGTH
        return f'{content[:MAX_CONTENT_LENGTH]}...(truncated {hidden} chars)'
    return data
