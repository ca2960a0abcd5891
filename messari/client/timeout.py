"""
Deadline enforcement for in-flight requests.
"""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, TypeVar

from messari.client.types import RequestTimeoutError

T = TypeVar("T")


async def reject_after_timeout(operation: Awaitable[T], timeout_ms: int) -> T:
    """Race ``operation`` against a ``timeout_ms`` timer.

    Whichever settles first decides the outcome. When the timer wins,
    :class:`RequestTimeoutError` is raised and the operation is left running:
    it is abandoned, not cancelled, and its eventual result or exception is
    discarded. An HTTP call abandoned this way keeps its connection busy until
    the server answers, so callers that need a hard stop should cancel the
    awaiting task instead, which does cancel the operation.

    The timer is cancelled on every exit path.

    Args:
        operation: Awaitable to run (coroutine, task or future)
        timeout_ms: Deadline in milliseconds, must be positive

    Returns:
        The operation's result

    Raises:
        RequestTimeoutError: If the deadline elapses first
        Exception: Whatever the operation raised, unchanged
    """
    if timeout_ms <= 0:
        raise ValueError(f"timeout_ms must be positive, got {timeout_ms}")

    loop = asyncio.get_running_loop()
    task = asyncio.ensure_future(operation)
    outcome: asyncio.Future[T] = loop.create_future()

    def _on_timeout() -> None:
        if not outcome.done():
            outcome.set_exception(RequestTimeoutError(timeout_ms))

    def _on_settled(done: asyncio.Future[Any]) -> None:
        if done.cancelled():
            if not outcome.done():
                outcome.cancel()
            return
        # Always retrieve the exception so an abandoned failure is not reported as unhandled
        error = done.exception()
        if outcome.done():
            return
        if error is not None:
            outcome.set_exception(error)
        else:
            outcome.set_result(done.result())

    timer = loop.call_later(timeout_ms / 1000, _on_timeout)
    task.add_done_callback(_on_settled)
    try:
        return await outcome
    except asyncio.CancelledError:
        if not task.done():
            task.cancel()
        raise
    finally:
        timer.cancel()
