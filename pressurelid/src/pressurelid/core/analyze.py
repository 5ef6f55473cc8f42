"""Static ReDoS heuristics for untrusted regular-expression patterns.

What:
  Decide, without running the pattern, whether it carries a shape known to
  trigger exponential or high-degree polynomial backtracking.

Why:
  The cheapest protection against catastrophic backtracking is to refuse the
  pattern before it is ever compiled. These checks are syntactic: they trade
  completeness for speed, so both false positives (benign groups used only for
  precedence) and false negatives (equivalent constructs spelled differently)
  are accepted residual risk. Runtime protection lives in
  :mod:`pressurelid.utils.regexsafe`.

How:
  - :data:`DANGEROUS_PATTERNS` is an ordered list of
    :class:`DangerSignature` records scanned first-match-wins.
  - :func:`count_quantifier_nesting` measures the deepest group level at which
    a quantifier appears; anything deeper than :data:`MAX_NESTING_DEPTH` is
    rejected.
  - :func:`quick_safety_check` lets trivially safe patterns skip both.

Interfaces:
  :class:`DangerSignature`, :data:`DANGEROUS_PATTERNS`, :func:`match_signature`,
  :func:`count_quantifier_nesting`, :func:`analyze_pattern`,
  :func:`quick_safety_check`.

Invariants & Safety:
  - Every function here is pure; identical input yields identical output and
    nothing is cached.
  - :func:`quick_safety_check` never returns ``True`` for a pattern that a
    signature in :data:`DANGEROUS_PATTERNS` would flag.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Sequence

from .results import PatternAnalysis, SafeRegexReason


MAX_NESTING_DEPTH = 2
QUANTIFIERS = frozenset("+*?")


@dataclass(frozen=True)
class DangerSignature:
    """One syntactic shape correlated with backtracking blowup.

    Attributes:
      matcher: Compiled pattern searched against the candidate pattern text.
      reason: Reason code reported when the signature matches.
      message: Human-readable explanation for the verdict.
    """

    matcher: re.Pattern[str]
    reason: SafeRegexReason
    message: str


DANGEROUS_PATTERNS: Sequence[DangerSignature] = (
    # (a+)+  (a*)*  (a{1,})+
    DangerSignature(
        matcher=re.compile(r"\([^)]*(?:[+*]|\{\d+,\})[^)]*\)[+*]"),
        reason="nested_quantifiers",
        message="Pattern contains nested quantifiers which can cause exponential backtracking",
    ),
    # (a|ab)+
    DangerSignature(
        matcher=re.compile(r"\([^)]*\|[^)]*\)[+*]"),
        reason="overlapping_alternation",
        message="Pattern contains alternation with quantifier which may cause backtracking",
    ),
    # (a+){10}  (.*a){20}  (x){2,}+
    DangerSignature(
        matcher=re.compile(r"\([^)]+\)\{[0-9,]+\}[+*]?"),
        reason="catastrophic_backtracking",
        message="Pattern contains repeated group which may cause backtracking",
    ),
    # ((a+)b*)
    DangerSignature(
        matcher=re.compile(r"\([^)]*\([^)]*[+*]\)[^)]*[+*]\)"),
        reason="nested_quantifiers",
        message="Pattern contains deeply nested quantifiers",
    ),
    # [a-z]+[a-z0-9]*
    DangerSignature(
        matcher=re.compile(r"\[[^\]]+\][+*]\[[^\]]+\][+*]"),
        reason="catastrophic_backtracking",
        message="Pattern contains overlapping character classes with quantifiers",
    ),
)


def match_signature(pattern: str) -> Optional[DangerSignature]:
    """Return the first signature in :data:`DANGEROUS_PATTERNS` matching ``pattern``."""

    for signature in DANGEROUS_PATTERNS:
        if signature.matcher.search(pattern):
            return signature
    return None


def count_quantifier_nesting(pattern: str) -> int:
    """Return the deepest group level at which an unescaped quantifier occurs.

    What:
      Scans ``pattern`` once, tracking how many unescaped ``(`` are open, and
      records the depth whenever ``+``, ``*`` or ``?`` appears inside a group.

    How:
      A character counts as escaped when the previous character is a
      backslash. This cannot tell ``\\\\+`` (escaped backslash, real
      quantifier) from ``\\+`` (escaped quantifier); the former is treated as
      escaped. Closing parentheses never drive the depth below zero.

    Returns:
      Maximum depth, or ``0`` when no quantifier sits inside any group.
    """

    max_depth = 0
    depth = 0
    prev = ""
    for char in pattern:
        if prev != "\\":
            if char == "(":
                depth += 1
            elif char == ")":
                depth = max(0, depth - 1)
            elif char in QUANTIFIERS and depth > 0:
                max_depth = max(max_depth, depth)
        prev = char
    return max_depth


def analyze_pattern(pattern: str) -> PatternAnalysis:
    """Analyse ``pattern`` for potential ReDoS shapes.

    What:
      Produces a :class:`PatternAnalysis` verdict for a raw pattern string.

    Why:
      This is the authoritative static gate used by the guard once the fast
      pre-check is inconclusive.

    How:
      Runs :func:`match_signature` first and returns its verdict on a hit, so
      signature priority decides the reason. Otherwise the quantifier nesting
      depth is compared with :data:`MAX_NESTING_DEPTH`.

    Args:
      pattern: Pattern text supplied by the caller.

    Returns:
      ``PatternAnalysis(safe=True, reason="ok")`` or an unsafe verdict with the
      matching reason code and message.
    """

    signature = match_signature(pattern)
    if signature is not None:
        return PatternAnalysis(safe=False, reason=signature.reason, message=signature.message)

    depth = count_quantifier_nesting(pattern)
    if depth > MAX_NESTING_DEPTH:
        return PatternAnalysis(
            safe=False,
            reason="nested_quantifiers",
            message=f"Pattern has excessive quantifier nesting depth ({depth})",
        )
    return PatternAnalysis(safe=True, reason="ok")


_REPEAT_CHARS = re.compile(r"[+*?{]")
_GROUP_CHARS = re.compile(r"[()]")
_ADJACENT_QUANTIFIED_CLASSES = re.compile(r"\][+*]\[")
_ANCHORED_LITERAL = re.compile(r"\^[^+*?()]+\$")


def quick_safety_check(pattern: str) -> bool:
    """Return ``True`` when ``pattern`` can skip :func:`analyze_pattern`.

    What:
      Cheap necessary-condition shortcut for patterns that cannot carry any
      signature: no repetition at all, no groups, or a plain anchored literal.

    How:
      ``{`` counts as repetition because a bounded repeat of a group is itself
      a signature. The group-free shortcut is withheld when two quantified
      character classes sit next to each other, since that shape needs no
      group. When in doubt the answer is ``False`` and full analysis runs.
    """

    if not _REPEAT_CHARS.search(pattern):
        return True
    if not _GROUP_CHARS.search(pattern) and not _ADJACENT_QUANTIFIED_CLASSES.search(pattern):
        return True
    return _ANCHORED_LITERAL.fullmatch(pattern) is not None
