"""Tests for the dataset lock retry policy."""

from unittest.mock import AsyncMock

import pytest

from dataverse_client.exceptions import NetworkError, RequestFailedError
from dataverse_client.retry import LockedRetryPolicy, is_locked_failure


def _failure(status_code: int, body: str) -> RequestFailedError:
    return RequestFailedError(
        f"failed with {status_code}",
        status_code=status_code,
        status_line=f"HTTP/1.1 {status_code}",
        body=body,
    )


LOCKED = _failure(403, '{"status":"ERROR","message":"This dataset is locked. Reason: Ingest"}')


@pytest.mark.parametrize(
    ("status_code", "body", "expected"),
    [
        (403, "This dataset is locked. Reason: InReview", True),
        (403, "Dataset cannot be edited due to dataset lock.", True),
        (400, "Failed to add file to dataset: lock", True),
        (403, "this dataset is locked", False),
        (400, "This dataset is locked", False),
        (403, "Forbidden", False),
        (500, "Failed to add file to dataset", False),
    ],
)
def test_is_locked_failure(status_code, body, expected):
    assert is_locked_failure(_failure(status_code, body)) is expected


def test_other_exceptions_are_not_lock_failures():
    assert is_locked_failure(NetworkError("connection refused")) is False
    assert is_locked_failure(ValueError("x")) is False


@pytest.mark.asyncio
async def test_success_on_first_attempt():
    attempt = AsyncMock(return_value="ok")
    result = await LockedRetryPolicy(retry_times=3, interval_ms=0).call(attempt)
    assert result == "ok"
    assert attempt.await_count == 1


@pytest.mark.asyncio
async def test_retries_until_unlocked():
    attempt = AsyncMock(side_effect=[LOCKED, LOCKED, "ok"])
    result = await LockedRetryPolicy(retry_times=5, interval_ms=1).call(attempt)
    assert result == "ok"
    assert attempt.await_count == 3


@pytest.mark.asyncio
async def test_budget_exhausted_raises_last_failure_with_attempts():
    final = _failure(403, "This dataset is locked")
    attempt = AsyncMock(side_effect=[LOCKED, LOCKED, final])
    with pytest.raises(RequestFailedError) as exc_info:
        await LockedRetryPolicy(retry_times=2, interval_ms=1).call(attempt)
    assert exc_info.value is final
    assert exc_info.value.attempts == 3
    assert attempt.await_count == 3


@pytest.mark.asyncio
async def test_zero_budget_attempts_once():
    attempt = AsyncMock(side_effect=LOCKED)
    with pytest.raises(RequestFailedError) as exc_info:
        await LockedRetryPolicy(retry_times=0, interval_ms=1).call(attempt)
    assert attempt.await_count == 1
    assert exc_info.value.attempts == 1


@pytest.mark.asyncio
async def test_non_lock_failure_is_not_retried():
    not_found = _failure(404, '{"status":"ERROR","message":"not found"}')
    attempt = AsyncMock(side_effect=not_found)
    with pytest.raises(RequestFailedError):
        await LockedRetryPolicy(retry_times=5, interval_ms=1).call(attempt)
    assert attempt.await_count == 1


@pytest.mark.asyncio
async def test_transport_errors_are_not_retried():
    attempt = AsyncMock(side_effect=NetworkError("connection refused"))
    with pytest.raises(NetworkError):
        await LockedRetryPolicy(retry_times=5, interval_ms=1).call(attempt)
    assert attempt.await_count == 1


@pytest.mark.asyncio
async def test_coroutine_function_with_arguments_is_awaited():
    calls = []

    async def send(path, *, method):
        calls.append((method, path))
        if len(calls) < 3:
            raise _failure(403, "This dataset is locked")
        return f"{method} {path}"

    result = await LockedRetryPolicy(retry_times=3, interval_ms=1).call(
        send, "datasets/5", method="PUT"
    )

    assert result == "PUT datasets/5"
    assert calls == [("PUT", "datasets/5")] * 3


@pytest.mark.asyncio
async def test_bound_coroutine_method_failure_propagates():
    class Transport:
        sent = 0

        async def send(self, status_code):
            self.sent += 1
            raise _failure(status_code, "Bad request")

    transport = Transport()
    with pytest.raises(RequestFailedError) as exc_info:
        await LockedRetryPolicy(retry_times=3, interval_ms=1).call(transport.send, 400)

    assert exc_info.value.status_code == 400
    assert transport.sent == 1
