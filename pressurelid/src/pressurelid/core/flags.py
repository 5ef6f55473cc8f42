"""Translate execution modifiers into :mod:`re` compilation flags."""
from __future__ import annotations

import re
from typing import Dict, Union


FlagsLike = Union[int, str, None]

# ``g`` (global) and ``y`` (sticky) describe iteration state that ``re``
# expresses through the calling method instead of a compile flag.
FLAG_LETTERS: Dict[str, int] = {
    "g": 0,
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "u": re.UNICODE,
    "y": 0,
}


def parse_flags(flags: FlagsLike) -> int:
    """Return the :mod:`re` flag bits for ``flags``.

    Integers (including :class:`re.RegexFlag` values) pass through unchanged.
    Strings are read as a set of modifier letters, e.g. ``"gi"``.

    Raises:
      ValueError: If a letter is unknown or repeated.
    """

    if flags is None:
        return 0
    if isinstance(flags, int):
        return int(flags)
    bits = 0
    seen: set[str] = set()
    for letter in flags:
        if letter not in FLAG_LETTERS:
            raise ValueError(f"invalid flag '{letter}'")
        if letter in seen:
            raise ValueError(f"duplicate flag '{letter}'")
        seen.add(letter)
        bits |= FLAG_LETTERS[letter]
    return bits
