"""Decorators shared by the codec entry points."""

import functools
import logging
import time
from typing import Callable

log = logging.getLogger(__name__)


def measure_time(func: Callable) -> Callable:
    """Log at info how long each call to ``func`` took and how many bytes or chars it returned."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        start = time.perf_counter()
        result = None
        try:
            result = func(*args, **kwargs)
            return result
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            size = f" ({len(result)} out)" if result is not None else " (failed)"
            log.info(f"{func.__name__} took {elapsed_ms:.2f} ms{size}")

    return wrapper
