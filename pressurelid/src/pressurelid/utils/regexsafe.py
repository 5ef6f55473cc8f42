"""Bounded-wait regex execution for compiled patterns.

What:
  Race a compiled pattern's ``search`` against a timer and report either the
  boolean match outcome or a :class:`RegexTimeoutError`.

Why:
  Static analysis cannot catch every pathological pattern. A watchdog is the
  second line of defense: the caller stops waiting once the budget is spent
  instead of hanging behind a runaway backtracking search.

How:
  CPython's ``re`` holds the GIL for the whole match, so a search running in a
  thread of this process would starve the event loop and the timer with it.
  The search therefore runs in a child process. A daemon relay thread blocks
  on the child's pipe (releasing the GIL) and settles asyncio futures through
  ``call_soon_threadsafe``. The awaiting side wraps the result future with
  :func:`asyncio.wait_for`, which acts as the first-settled-wins combinator:
  the timer is cancelled when the search settles first, and the child is
  terminated when the timer fires first.

Interfaces:
  :class:`RegexTimeoutError`, :func:`search_with_timeout`.

Invariants & Safety:
  - The budget starts once the child reports it is ready, so process start-up
    is not charged against ``timeout_ms``.
  - A child that overran is terminated before :class:`RegexTimeoutError`
    reaches the caller; no backtracking search outlives its call.
  - Exceptions raised by the engine are re-raised with their original type
    and message.
  - Patterns and subjects must be picklable. Compiled ``re`` patterns are.
"""
from __future__ import annotations

import asyncio
import multiprocessing as mp
import sys
import threading
from multiprocessing.connection import Connection
from re import Pattern
from typing import Any, Optional


EXECUTION_TIMEOUT = "execution_timeout"

_READY = "ready"


class RegexTimeoutError(TimeoutError):
    """Raised when a guarded regex search outlives its time budget.

    What:
      Declares a dedicated exception for the losing side of the timer race.

    Why:
      Callers must be able to tell a timeout apart from a negative match and
      from genuine engine faults without catching :class:`TimeoutError`
      broadly.

    How:
      Inherits from :class:`TimeoutError` and carries the ``execution_timeout``
      reason code plus the budget that was exceeded.
    """

    reason = EXECUTION_TIMEOUT

    def __init__(self, message: str, *, timeout_ms: int) -> None:
        super().__init__(message)
        self.timeout_ms = timeout_ms


def _start_method() -> str:
    # fork is unsafe on macOS and missing on Windows.
    if sys.platform in ("darwin", "win32"):
        return "spawn"
    return "fork"


def _search_in_child(compiled: Pattern[Any], text: Any, writer: Connection) -> None:
    """Child-process entry point: announce readiness, search, report."""

    with writer:
        writer.send((_READY, None))
        try:
            matched = compiled.search(text) is not None
        except Exception as exc:
            try:
                writer.send(("error", exc))
            except Exception:
                writer.send(("error", RuntimeError(f"{type(exc).__name__}: {exc}")))
        else:
            writer.send(("ok", matched))


def _settle(future: "asyncio.Future[bool]", result: Optional[bool], error: Optional[BaseException]) -> None:
    # The future is already cancelled when the timer won the race.
    if future.done():
        return
    if error is not None:
        future.set_exception(error)
    else:
        future.set_result(bool(result))


def _relay(
    loop: asyncio.AbstractEventLoop,
    reader: Connection,
    started: "asyncio.Future[bool]",
    finished: "asyncio.Future[bool]",
) -> None:
    """Forward the child's messages from ``reader`` onto the event loop."""

    def post(future: "asyncio.Future[bool]", result: Optional[bool], error: Optional[BaseException]) -> bool:
        try:
            loop.call_soon_threadsafe(_settle, future, result, error)
        except RuntimeError:
            # Loop closed after the timer won; nobody is waiting any more.
            return False
        return True

    with reader:
        try:
            reader.recv()
        except EOFError:
            lost = ChildProcessError("regex worker exited before starting the search")
            if post(started, None, lost):
                post(finished, None, lost)
            return
        if not post(started, True, None):
            return
        try:
            status, payload = reader.recv()
        except EOFError:
            # Terminated by the timer, or crashed inside the engine.
            post(finished, None, ChildProcessError("regex worker exited without a result"))
            return
        if status == "error":
            post(finished, None, payload)
        else:
            post(finished, payload, None)


async def search_with_timeout(compiled: Pattern[Any], text: Any, *, timeout_ms: int) -> bool:
    """Search ``text`` with ``compiled`` while bounding the caller's wait.

    What:
      Executes ``compiled.search(text)`` in a child process and resolves to
      ``True`` when a match is found, ``False`` otherwise.

    Why:
      Provides a deterministic wait ceiling when evaluating untrusted strings
      against patterns that passed static analysis but may still backtrack.

    How:
      Starts the child with a one-way pipe, hands the read end to a daemon
      relay thread, waits for the readiness signal, then awaits the result
      under :func:`asyncio.wait_for`. A timeout terminates the child and is
      translated into :class:`RegexTimeoutError`.

    Args:
      compiled: Compiled pattern exposing ``search``.
      text: Subject string to scan.
      timeout_ms: Wait budget in milliseconds.

    Returns:
      ``True`` when the pattern matches, ``False`` otherwise.

    Raises:
      RegexTimeoutError: If the search does not settle within ``timeout_ms``.
      ChildProcessError: If the child dies without reporting an outcome.
      Exception: Any exception raised by the engine is propagated.
    """

    loop = asyncio.get_running_loop()
    started: "asyncio.Future[bool]" = loop.create_future()
    finished: "asyncio.Future[bool]" = loop.create_future()

    context = mp.get_context(_start_method())
    reader, writer = context.Pipe(duplex=False)
    process = context.Process(
        target=_search_in_child,
        args=(compiled, text, writer),
        name="pressurelid-search",
        daemon=True,
    )
    process.start()
    # Only the child may hold the write end, so its exit surfaces as EOF.
    writer.close()
    threading.Thread(
        target=_relay, args=(loop, reader, started, finished), name="pressurelid-relay", daemon=True
    ).start()

    try:
        await started
        return await asyncio.wait_for(finished, timeout_ms / 1000)
    except asyncio.TimeoutError:
        raise RegexTimeoutError(
            f"Regex execution timed out after {timeout_ms}ms", timeout_ms=timeout_ms
        ) from None
    finally:
        if process.is_alive():
            process.terminate()
        process.join()
