"""Retry policy for requests that fail because a dataset is locked.

Dataverse locks a dataset while it post-processes it in the background, for
example during ingest of a tabular file. Requests that touch the dataset in
that window fail with a recognizable error body; most such locks clear within
a few seconds. This policy waits a fixed interval and reissues the identical
request, up to a fixed number of retries.

The failure is recognized by literal English substrings of the error body.
Other failures, including transport errors, are never retried here.
"""

from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

import tenacity
from tenacity import (
    AsyncRetrying,
    retry_if_exception,
    stop_after_attempt,
    wait_fixed,
)

from .constants import LOCKED_BAD_REQUEST_SIGNATURES, LOCKED_FORBIDDEN_SIGNATURES
from .exceptions import RequestFailedError
from .log_config import logger
from .redaction import redact_url

T = TypeVar("T")


def is_locked_failure(exc: BaseException) -> bool:
    """Tells whether a failure is one of the transient lock conditions.

    A 403 whose body contains one of the "dataset is locked" texts, or a 400
    whose body contains "Failed to add file to dataset".
    """
    if not isinstance(exc, RequestFailedError):
        return False
    if exc.status_code == 403:
        return any(signature in exc.body for signature in LOCKED_FORBIDDEN_SIGNATURES)
    if exc.status_code == 400:
        return any(
            signature in exc.body for signature in LOCKED_BAD_REQUEST_SIGNATURES
        )
    return False


class LockedRetryPolicy:
    """Fixed-delay, bounded retry of lock failures.

    Attributes:
        retry_times: Retries after the first attempt; 0 disables retrying.
        interval_ms: Pause between attempts in milliseconds.
    """

    def __init__(self, retry_times: int, interval_ms: int):
        self.retry_times = retry_times
        self.interval_ms = interval_ms

    def _retrying(self) -> AsyncRetrying:
        return AsyncRetrying(
            stop=stop_after_attempt(self.retry_times + 1),  # +1 for initial attempt
            wait=wait_fixed(self.interval_ms / 1000),
            retry=retry_if_exception(is_locked_failure),
            reraise=True,
            before_sleep=self._before_retry_sleep,
        )

    async def call(
        self, fn: Callable[..., Awaitable[T]], *args: Any, **kwargs: Any
    ) -> T:
        """Awaits `fn(*args, **kwargs)` until it succeeds or the budget is spent.

        `fn` must be a coroutine function; each attempt calls it anew. Failures
        other than lock failures are raised at once.

        On final failure the last RequestFailedError is raised with its
        `attempts` set to the number of attempts made.
        """
        retrying = self._retrying()
        try:
            result = await retrying(fn, *args, **kwargs)
        except RequestFailedError as e:
            e.attempts = retrying.statistics.get("attempt_number", 1)
            if is_locked_failure(e):
                logger.error(
                    f"Giving up after {e.attempts} attempt(s): dataset still locked"
                )
            raise
        attempts = retrying.statistics.get("attempt_number", 1)
        if attempts > 1:
            logger.info(f"Request succeeded after {attempts} attempts")
        return result

    async def _before_retry_sleep(self, retry_state: tenacity.RetryCallState) -> None:
        """Logs the lock failure before tenacity sleeps."""
        if not retry_state.outcome:
            return
        exc = retry_state.outcome.exception()
        request_info = ""
        if isinstance(exc, RequestFailedError) and exc.request is not None:
            request_info = f"for {exc.request.method} {redact_url(exc.request.url)} "
        logger.warning(
            f"Dataset locked {request_info}(status {getattr(exc, 'status_code', 'N/A')}); "
            f"retrying in {self.interval_ms} ms "
            f"(attempt {retry_state.attempt_number}/{self.retry_times + 1})"
        )
