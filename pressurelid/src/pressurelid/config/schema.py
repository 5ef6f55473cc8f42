"""Pydantic models describing pressurelid guard configuration."""
from __future__ import annotations

from typing import Any, Callable, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError as _PydanticValidationError


class ValidationError(ValueError):
    """Raised when configuration data does not satisfy the schema."""


NotifyCallback = Callable[[str, str], None]


class SafeRegexConfig(BaseModel):
    """Limits and notification hooks applied by a :class:`SafeRegex` guard.

    ``max_backtrack_depth`` is advisory; no current check enforces it.
    ``on_block`` and ``on_warning`` receive ``(message, pattern)``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    max_length: int = Field(default=500, gt=0)
    timeout_ms: int = Field(default=1000, gt=0)
    max_backtrack_depth: int = Field(default=100000, gt=0)
    on_block: Optional[NotifyCallback] = None
    on_warning: Optional[NotifyCallback] = None


DEFAULT_CONFIG = SafeRegexConfig()


def merge_config(base: SafeRegexConfig, overrides: Mapping[str, Any]) -> SafeRegexConfig:
    """Return a new configuration with ``overrides`` shallow-merged onto ``base``.

    What:
      Builds a fresh, validated :class:`SafeRegexConfig` value; ``base`` is
      never mutated.

    Why:
      The guard replaces its configuration wholesale so a concurrent reader
      never observes a half-applied update.

    How:
      Copies every declared field from ``base``, applies ``overrides`` on top,
      and re-validates the payload so unknown keys and out-of-range limits are
      rejected exactly as at construction time.

    Args:
      base: Configuration to start from.
      overrides: Partial field values to apply.

    Returns:
      Validated configuration value.

    Raises:
      ValidationError: If the merged payload does not satisfy the schema.
    """

    payload = {name: getattr(base, name) for name in SafeRegexConfig.model_fields}
    payload.update(overrides)
    try:
        return SafeRegexConfig.model_validate(payload)
    except _PydanticValidationError as exc:
        raise ValidationError(str(exc)) from exc
