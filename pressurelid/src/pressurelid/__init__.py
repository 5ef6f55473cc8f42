"""
Module: pressurelid.__init__

What:
  Aggregate the public API of the pressurelid ReDoS guard: static pattern
  analysis, guarded pattern construction, glob and literal helpers, and
  bounded-wait execution.

Why:
  Callers should not need to know the internal layout (``config``, ``core``,
  ``utils``) to vet an untrusted pattern. Keeping the surface explicit also
  documents which helpers are supported.

How:
  Re-export the vetted names and declare them in ``__all__``.

Interfaces:
  - SafeRegex / create_safe_regex / glob_to_safe_regex / escape_for_regex:
    Main API.
  - analyze_pattern / quick_safety_check: Static analysis for advanced users.
  - SafeRegexConfig / DEFAULT_CONFIG: Configuration.
  - SafeRegexResult / SafeRegexReason / PatternAnalysis / RegexTimeoutError:
    Outcome types.

Invariants:
  - Importing the package has no side effects beyond compiling the static
    signature patterns.
"""

from .config import DEFAULT_CONFIG, SafeRegexConfig, ValidationError
from .core import (
    PatternAnalysis,
    SafeRegex,
    SafeRegexReason,
    SafeRegexResult,
    analyze_pattern,
    create_safe_regex,
    escape_for_regex,
    glob_to_safe_regex,
    quick_safety_check,
)
from .utils import RegexTimeoutError

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "DEFAULT_CONFIG",
    "SafeRegexConfig",
    "ValidationError",
    "PatternAnalysis",
    "SafeRegex",
    "SafeRegexReason",
    "SafeRegexResult",
    "analyze_pattern",
    "create_safe_regex",
    "escape_for_regex",
    "glob_to_safe_regex",
    "quick_safety_check",
    "RegexTimeoutError",
]
