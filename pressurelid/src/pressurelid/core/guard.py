"""Guarded construction and bounded-wait execution of untrusted patterns.

What:
  :class:`SafeRegex` owns a :class:`~pressurelid.config.SafeRegexConfig` and
  decides whether a pattern may be compiled, compiles it with :mod:`re`, and
  races its execution against a timer. Module-level helpers offer the same
  entry points on a freshly configured guard.

Why:
  Patterns coming from configuration files, search boxes or API payloads can
  be crafted to backtrack for minutes. Rejecting dangerous shapes up front and
  bounding how long a caller waits on execution keeps one request from stalling
  the whole process.

How:
  ``create`` applies the length limit, the fast pre-check and, when that is
  inconclusive, the full analyzer before compiling. ``glob_to_regex`` and
  ``from_user_input`` build pattern text and funnel it through ``create``.
  ``test_with_timeout`` delegates the race to
  :func:`~pressurelid.utils.regexsafe.search_with_timeout`.

Interfaces:
  :class:`SafeRegex`, :func:`create_safe_regex`, :func:`glob_to_safe_regex`,
  :func:`escape_for_regex`.

Invariants & Safety:
  - ``create``-family failures are returned as ``SafeRegexResult(safe=False)``;
    they never raise.
  - At most one ``on_block`` call per ``create``, and only for safety blocks.
    Syntax errors are not blocks.
  - Callbacks run synchronously before the call returns or raises; exceptions
    they raise are not caught.
  - Configuration is replaced wholesale, never mutated in place. Instances do
    no internal locking and assume a single logical owner.
"""
from __future__ import annotations

import re
from typing import Any, Optional

from ..config.schema import DEFAULT_CONFIG, SafeRegexConfig, merge_config
from ..utils.logging import get_logger
from ..utils.regexsafe import RegexTimeoutError, search_with_timeout
from .analyze import analyze_pattern, quick_safety_check
from .flags import FlagsLike, parse_flags
from .results import SafeRegexResult
from .transforms import escape_for_regex, glob_to_pattern


_LOGGER = get_logger("pressurelid.guard")


class SafeRegex:
    """Protected regex creation and execution.

    Example::

        guard = SafeRegex(max_length=200)
        result = guard.create(user_pattern)
        if result.safe:
            matched = await guard.test_with_timeout(result.regex, subject)
    """

    def __init__(self, config: Optional[SafeRegexConfig] = None, **overrides: Any) -> None:
        self._config = merge_config(config or DEFAULT_CONFIG, overrides)

    def create(self, pattern: str, flags: FlagsLike = 0) -> SafeRegexResult:
        """Compile ``pattern`` if it passes the length and safety checks.

        What:
          Returns a :class:`SafeRegexResult` holding either the compiled
          pattern or the reason it was refused.

        How:
          1. Reject patterns longer than ``max_length`` (``pattern_too_long``).
          2. Unless :func:`quick_safety_check` clears the pattern, run
             :func:`analyze_pattern` and reject unsafe verdicts.
          3. Compile with :func:`re.compile`; engine errors become
             ``invalid_syntax`` without notifying ``on_block``.

        Args:
          pattern: Pattern text supplied by the caller.
          flags: ``re`` flag bits or modifier letters such as ``"gi"``.

        Returns:
          The construction outcome.
        """

        config = self._config
        if len(pattern) > config.max_length:
            message = f"Pattern exceeds maximum length of {config.max_length}"
            self._block(message, pattern, "pattern_too_long")
            return SafeRegexResult.rejected("pattern_too_long", message)

        if not quick_safety_check(pattern):
            analysis = analyze_pattern(pattern)
            if not analysis.safe:
                message = analysis.message or "Pattern blocked"
                self._block(message, pattern, analysis.reason)
                return SafeRegexResult.rejected(analysis.reason, message)

        try:
            compiled = re.compile(pattern, parse_flags(flags))
        except (re.error, ValueError) as exc:
            _LOGGER.info("pattern rejected by engine", reason="invalid_syntax", pattern=pattern)
            return SafeRegexResult.rejected("invalid_syntax", f"Invalid regex syntax: {exc}")
        return SafeRegexResult.accepted(compiled)

    async def test_with_timeout(self, regex: re.Pattern[str], text: str) -> bool:
        """Search ``text`` with ``regex``, giving up after ``timeout_ms``.

        What:
          Resolves to the boolean outcome of ``regex.search(text)``.

        Why:
          Static analysis is heuristic; this bounds how long the caller waits
          on a pattern that slipped through.

        How:
          Races a search in a child process against a timer. If the timer
          wins, the child is terminated, ``on_warning`` is notified with the
          pattern source and :class:`RegexTimeoutError` is raised.

        Raises:
          RegexTimeoutError: If the search outlives ``timeout_ms``.
          Exception: Engine faults propagate unchanged.
        """

        config = self._config
        try:
            return await search_with_timeout(regex, text, timeout_ms=config.timeout_ms)
        except RegexTimeoutError:
            message = f"Regex execution exceeded {config.timeout_ms}ms timeout"
            _LOGGER.warning(message, reason=RegexTimeoutError.reason, timeout_ms=config.timeout_ms)
            if config.on_warning is not None:
                config.on_warning(message, regex.pattern)
            raise

    def glob_to_regex(self, glob: str) -> SafeRegexResult:
        """Convert ``glob`` into a case-insensitive, whole-string pattern.

        ``*.md`` matches ``readme.md`` but not ``a/readme.md``; ``**/*.md``
        matches ``a/b/readme.md``. The translated pattern is checked like any
        other.
        """

        return self.create(glob_to_pattern(glob), re.IGNORECASE)

    def from_user_input(self, text: str) -> SafeRegexResult:
        """Build a case-insensitive pattern matching ``text`` literally."""

        return self.create(escape_for_regex(text), re.IGNORECASE)

    def configure(self, **overrides: Any) -> None:
        """Replace the configuration with ``overrides`` merged onto it.

        Takes effect for subsequent calls only.

        Raises:
          ValidationError: If the merged configuration is invalid; the current
            configuration is kept.
        """

        self._config = merge_config(self._config, overrides)

    def get_config(self) -> SafeRegexConfig:
        """Return an independent copy of the current configuration."""

        return self._config.model_copy()

    def _block(self, message: str, pattern: str, reason: str) -> None:
        _LOGGER.warning("pattern blocked", reason=reason, length=len(pattern), pattern=pattern)
        if self._config.on_block is not None:
            self._config.on_block(message, pattern)


def create_safe_regex(pattern: str, flags: FlagsLike = 0) -> SafeRegexResult:
    """Run :meth:`SafeRegex.create` on a default-configured guard."""

    return SafeRegex().create(pattern, flags)


def glob_to_safe_regex(glob: str) -> SafeRegexResult:
    """Run :meth:`SafeRegex.glob_to_regex` on a default-configured guard."""

    return SafeRegex().glob_to_regex(glob)


__all__ = [
    "SafeRegex",
    "create_safe_regex",
    "glob_to_safe_regex",
    "escape_for_regex",
]
