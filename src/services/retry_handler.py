"""
Retry handler with exponential backoff and jitter for API calls.
"""

import logging
import random
import socket
import threading
import time
from typing import Any, Callable, Optional

import requests
from googleapiclient.errors import HttpError

logger = logging.getLogger(__name__)


class RetryExhaustedException(Exception):
    """Raised when all retry attempts have been exhausted."""

    pass


def _status_code(exception: Exception) -> Optional[int]:
    """Extract the HTTP status from a requests or Google API error."""
    if isinstance(exception, HttpError):
        return exception.resp.status
    if isinstance(exception, requests.exceptions.HTTPError):
        response = exception.response
        return response.status_code if response is not None else None
    return None


def is_transient_error(exception: Exception) -> bool:
    """
    Decide whether an error is worth retrying.

    Retries HTTP 429 and 5xx responses from either Clockify (``requests``) or
    Google (``googleapiclient``), plus connection errors and timeouts.
    """
    status_code = _status_code(exception)
    if status_code is not None:
        return status_code == 429 or 500 <= status_code < 600

    return isinstance(
        exception,
        (
            socket.timeout,
            requests.exceptions.ConnectionError,
            requests.exceptions.Timeout,
        ),
    )


class RetryHandler:
    """
    Executes callables with retries, exponential backoff, and jitter.

    A single handler is shared by the worker threads that fetch time entries,
    so statistics are guarded by a lock.
    """

    def __init__(
        self,
        max_retries: int = 3,
        base_delay: float = 1.0,
        max_delay: float = 30.0,
        exponential_base: float = 2,
        jitter_factor: float = 0.1,
        retry_condition: Optional[Callable[[Exception], bool]] = None,
    ):
        """
        Initialize retry handler.

        Args:
            max_retries: Maximum number of retry attempts after the first call
            base_delay: Base delay for exponential backoff (seconds)
            max_delay: Maximum delay between retries (seconds)
            exponential_base: Base for exponential backoff calculation
            jitter_factor: Factor for random jitter (0.0 to 1.0)
            retry_condition: Predicate deciding whether an error is retried
        """
        self.max_retries = max_retries
        self.base_delay = base_delay
        self.max_delay = max_delay
        self.exponential_base = exponential_base
        self.jitter_factor = jitter_factor
        self.retry_condition = retry_condition or is_transient_error

        self._total_calls = 0
        self._total_retries = 0
        self._total_failures = 0
        self._lock = threading.Lock()

    def _calculate_delay(self, attempt: int) -> float:
        """Delay before retry number ``attempt`` (0-based), capped and jittered."""
        delay = min(self.base_delay * (self.exponential_base**attempt), self.max_delay)
        jitter = random.uniform(-self.jitter_factor, self.jitter_factor) * delay
        return max(0.0, delay + jitter)

    def execute_with_retry(self, func: Callable, *args, **kwargs) -> Any:
        """
        Execute function with retry logic.

        Returns:
            Result of function execution

        Raises:
            RetryExhaustedException: If a transient error persists past the
                last attempt
            Exception: The original exception if it is not retryable
        """
        func_name = getattr(func, "__name__", repr(func))
        with self._lock:
            self._total_calls += 1

        for attempt in range(self.max_retries + 1):
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                if not self.retry_condition(e):
                    logger.debug(f"Not retrying {func_name}: {type(e).__name__}")
                    raise

                if attempt >= self.max_retries:
                    logger.warning(
                        f"Max retries ({self.max_retries}) exceeded for {func_name}"
                    )
                    with self._lock:
                        self._total_retries += attempt
                        self._total_failures += 1
                    raise RetryExhaustedException(
                        f"Max retries ({self.max_retries}) exceeded. "
                        f"Last error: {type(e).__name__}: {e}"
                    ) from e

                delay = self._calculate_delay(attempt)
                logger.debug(
                    f"Retrying {func_name} in {delay:.2f}s "
                    f"(attempt {attempt + 1}/{self.max_retries + 1}). "
                    f"Error: {type(e).__name__}: {e}"
                )
                time.sleep(delay)
                continue

            if attempt > 0:
                logger.info(f"Function {func_name} succeeded after {attempt} retries")
                with self._lock:
                    self._total_retries += attempt
            return result

    def get_retry_statistics(self) -> dict:
        """Return call, retry, and failure counters."""
        with self._lock:
            return {
                "total_calls": self._total_calls,
                "total_retries": self._total_retries,
                "total_failures": self._total_failures,
            }
