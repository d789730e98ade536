"""Backoff for recipe downloads that fail before the server answers."""

import logging
import time
from functools import wraps
from typing import Any, Callable

import requests

logger = logging.getLogger(__name__)

# Transport failures only; an HTTP error status is a real answer
TRANSIENT_ERRORS = (
    requests.exceptions.ConnectionError,
    requests.exceptions.ChunkedEncodingError,
    requests.exceptions.ReadTimeout,
    ConnectionResetError,
)


def retry_fetch(attempts: int = 3, first_delay: float = 1.0) -> Callable:
    """Call a fetch function again when the connection drops.

    The wait doubles after every failed attempt. Once ``attempts`` calls
    have failed, the last transport error propagates to the caller.

    Args:
        attempts: Total number of calls, including the first
        first_delay: Seconds to wait after the first failure

    Example:
        @retry_fetch(attempts=4)
        def download_catalog(url):
            return requests.get(url, timeout=30)
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            wait = first_delay
            for attempt in range(1, attempts + 1):
                try:
                    return func(*args, **kwargs)
                except TRANSIENT_ERRORS as e:
                    if attempt == attempts:
                        logger.error(f"{func.__name__} gave up after {attempts} tries: {e}")
                        raise
                    logger.warning(
                        f"{func.__name__} try {attempt} of {attempts} lost the connection"
                        f" ({e}); waiting {wait:g}s"
                    )
                    time.sleep(wait)
                    wait *= 2

        return wrapper

    return decorator
