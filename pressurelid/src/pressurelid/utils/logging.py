"""Structured JSON logging for pressurelid guard decisions.

What:
  Offer a small facade over text streams so the guard can emit one JSON line
  per decision (blocked pattern, syntax rejection, execution timeout) with a
  stable set of fields.

Why:
  Blocked patterns are security events. Operators grep and index them, so a
  fixed layout keeps parsing trivial. The patterns and inputs themselves come
  from untrusted callers and must never be copied into shared log storage.

How:
  Provide a :class:`JsonLogger` dataclass bound to a stream and a component
  label. ``extra`` dictionaries are scrubbed via a recursive redaction helper
  before being serialised with ``json.dump``.

Interfaces:
  :class:`JsonLogger`, :func:`get_logger`.

Invariants & Safety:
  - Every payload includes an ISO8601 timestamp, severity, and component name.
  - Keys carrying caller text (``pattern``, ``input``, ``text``) are replaced
    with ``[redacted]`` even inside nested dictionaries.
  - Streams are flushed after every write.
"""
from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional


REDACTED = "[redacted]"
SENSITIVE_KEYS = frozenset({"pattern", "input", "text"})


@dataclass
class JsonLogger:
    """Structured JSON logger with automatic redaction.

    What:
      Emits single-line JSON entries that include a timestamp, severity, a
      component tag, and optional supplemental fields.

    Why:
      Centralising the redaction logic guarantees that no call site can leak a
      caller-supplied pattern or subject string by accident.

    How:
      Stores the destination stream and component label, then exposes
      :meth:`log` plus the :meth:`info` and :meth:`warning`
      shortcuts that merge a canonical payload with redacted extras.
    """

    stream: Any = field(default_factory=lambda: sys.stderr)
    component: str = "pressurelid"

    def log(self, level: str, message: str, *, extra: Optional[Dict[str, Any]] = None) -> None:
        """Emit a structured JSON log entry.

        Args:
          level: Human-readable severity (e.g., ``"info"`` or ``"warn"``).
          message: Core log message.
          extra: Optional context dictionary that will be redacted recursively.
        """

        payload = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "lvl": level.upper(),
            "msg": message,
            "component": self.component,
        }
        if extra:
            payload.update(self._redact(extra))
        json.dump(payload, self.stream, separators=(",", ":"), default=str)
        self.stream.write("\n")
        self.stream.flush()

    def info(self, message: str, **kwargs: Any) -> None:
        """Log an informational message with structured context."""

        self.log("INFO", message, extra=kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning message while enforcing redaction."""

        self.log("WARN", message, extra=kwargs)

    @staticmethod
    def _redact(data: Dict[str, Any]) -> Dict[str, Any]:
        """Return a copy of ``data`` with caller-supplied text masked.

        What:
          Replaces the values of :data:`SENSITIVE_KEYS` with ``[redacted]``.

        How:
          Walks the dictionary, recursing into nested dictionaries so deep
          structures are scrubbed while keeping their shape.

        Args:
          data: Arbitrary metadata to sanitise.

        Returns:
          A copy of ``data`` with sensitive values masked.
        """

        result: Dict[str, Any] = {}
        for key, value in data.items():
            if key in SENSITIVE_KEYS:
                result[key] = REDACTED
            elif isinstance(value, dict):
                result[key] = JsonLogger._redact(value)
            else:
                result[key] = value
        return result


def get_logger(component: str) -> JsonLogger:
    """Construct a :class:`JsonLogger` for the requested component.

    Args:
      component: Logical subsystem name to include in log payloads.

    Returns:
      Configured :class:`JsonLogger` instance writing to ``stderr``.
    """

    return JsonLogger(component=component)
