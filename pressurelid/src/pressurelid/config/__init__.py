"""pressurelid configuration package.

What:
  Provide the import surface for the guard configuration schema and its merge
  helper.

Why:
  Callers must go through the schema types so limits and callbacks are
  validated before a guard ever uses them.

Interfaces:
  - SafeRegexConfig / DEFAULT_CONFIG: Frozen configuration model and the
    shared default value.
  - merge_config: Produce a new configuration from a base plus overrides.
  - ValidationError: Raised for malformed configuration payloads.
"""

from .schema import DEFAULT_CONFIG, SafeRegexConfig, ValidationError, merge_config

__all__ = [
    "DEFAULT_CONFIG",
    "SafeRegexConfig",
    "ValidationError",
    "merge_config",
]
