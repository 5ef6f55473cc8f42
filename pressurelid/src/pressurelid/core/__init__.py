"""pressurelid core: static analysis, pattern transforms, and the guard facade.

What:
  Aggregate the analyzer, the glob/literal transforms, the flag parser, the
  result types, and :class:`SafeRegex`.

Interfaces:
  - analyze_pattern / quick_safety_check / count_quantifier_nesting:
    Static heuristics.
  - glob_to_pattern / escape_for_regex: Pattern text builders.
  - SafeRegex / create_safe_regex / glob_to_safe_regex: Guarded construction
    and bounded-wait execution.
  - PatternAnalysis / SafeRegexResult / SafeRegexReason: Outcome types.
"""

from .analyze import (
    DANGEROUS_PATTERNS,
    DangerSignature,
    analyze_pattern,
    count_quantifier_nesting,
    quick_safety_check,
)
from .flags import parse_flags
from .guard import SafeRegex, create_safe_regex, glob_to_safe_regex
from .results import REASON_CODES, PatternAnalysis, SafeRegexReason, SafeRegexResult
from .transforms import escape_for_regex, glob_to_pattern

__all__ = [
    "DANGEROUS_PATTERNS",
    "DangerSignature",
    "analyze_pattern",
    "count_quantifier_nesting",
    "quick_safety_check",
    "parse_flags",
    "SafeRegex",
    "create_safe_regex",
    "glob_to_safe_regex",
    "REASON_CODES",
    "PatternAnalysis",
    "SafeRegexReason",
    "SafeRegexResult",
    "escape_for_regex",
    "glob_to_pattern",
]
