"""Result containers and reason codes shared by the analyzer and the guard.

What:
  Declare the closed set of reason codes plus the two immutable outcome types:
  :class:`PatternAnalysis` (static verdict) and :class:`SafeRegexResult`
  (caller-facing result of pattern construction).

Why:
  Returning dataclasses avoids ``None``/truthiness ambiguity and lets callers
  branch on ``safe`` and ``reason`` without parsing messages.

Interfaces:
  :data:`SafeRegexReason`, :data:`REASON_CODES`, :class:`PatternAnalysis`,
  :class:`SafeRegexResult`.

Invariants & Safety:
  - Reason codes are exhaustive and stable; a new detector maps onto an
    existing code or extends the set, never overloads a meaning.
  - ``SafeRegexResult.regex`` is populated only when ``safe`` is ``True`` and
    ``error`` only when it is ``False``.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal, Optional, get_args


SafeRegexReason = Literal[
    "ok",
    "pattern_too_long",
    "nested_quantifiers",
    "overlapping_alternation",
    "catastrophic_backtracking",
    "invalid_syntax",
    "execution_timeout",
]

REASON_CODES: tuple[str, ...] = get_args(SafeRegexReason)


@dataclass(frozen=True)
class PatternAnalysis:
    """Static verdict produced by :func:`~pressurelid.core.analyze.analyze_pattern`.

    Attributes:
      safe: ``True`` when no heuristic flagged the pattern.
      reason: Reason code; ``ok`` for safe patterns.
      message: Human-readable explanation for unsafe verdicts.
    """

    safe: bool
    reason: SafeRegexReason
    message: Optional[str] = None


@dataclass(frozen=True)
class SafeRegexResult:
    """Outcome of guarded pattern construction.

    What:
      Records whether the pattern was accepted and either the compiled pattern
      or a displayable error.

    Why:
      All construction failures are recoverable, so they surface as a value
      instead of an exception.

    How:
      Callers inspect ``safe`` before touching ``regex``; ``reason`` drives
      programmatic handling and ``error`` is safe to log or display.
    """

    safe: bool
    regex: Optional[re.Pattern[str]] = None
    error: Optional[str] = None
    reason: Optional[SafeRegexReason] = None

    @classmethod
    def accepted(cls, regex: re.Pattern[str]) -> "SafeRegexResult":
        return cls(safe=True, regex=regex, reason="ok")

    @classmethod
    def rejected(cls, reason: SafeRegexReason, error: str) -> "SafeRegexResult":
        return cls(safe=False, error=error, reason=reason)
