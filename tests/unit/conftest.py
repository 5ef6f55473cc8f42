"""Pytest fixtures for the unit suites.

What:
  Make ``tests/unit`` importable for the shared vector tables and expose a
  ``guard_events`` fixture that records callback notifications, plus a
  ``log_stream`` fixture capturing the guard's structured log lines.

Why:
  Many tests assert on ``on_block``/``on_warning`` calls and log payloads;
  sharing the recorders keeps those assertions uniform.

Interfaces:
  :func:`guard_events`, :func:`log_stream` (pytest fixtures).

Invariants & Safety:
  - Each test receives fresh recorders and a fresh log buffer.
"""

import io
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

import pressurelid.core.guard as guard_module
from pressurelid.utils.logging import JsonLogger

UNIT_DIR = Path(__file__).resolve().parent
if str(UNIT_DIR) not in sys.path:
    sys.path.insert(0, str(UNIT_DIR))


@pytest.fixture
def guard_events() -> Dict[str, Any]:
    """Yield recorders for ``on_block`` and ``on_warning`` callbacks.

    What:
      Returns a dictionary with ``blocked`` and ``warned`` lists plus the two
      callables that append ``(message, pattern)`` tuples to them.

    Why:
      Callbacks are fire-and-forget; recording their arguments lets tests
      assert both the count and the payload of each notification.
    """

    events: Dict[str, Any] = {"blocked": [], "warned": []}
    events["on_block"] = lambda message, pattern: events["blocked"].append((message, pattern))
    events["on_warning"] = lambda message, pattern: events["warned"].append((message, pattern))
    return events


@pytest.fixture
def log_stream(monkeypatch: pytest.MonkeyPatch) -> io.StringIO:
    """Redirect the guard logger into an in-memory buffer."""

    stream = io.StringIO()
    monkeypatch.setattr(guard_module, "_LOGGER", JsonLogger(stream=stream, component="pressurelid.guard"))
    return stream
