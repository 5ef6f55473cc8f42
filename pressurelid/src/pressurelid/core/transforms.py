"""Text transforms that build patterns from globs and literal input.

What:
  Convert glob syntax or arbitrary literal text into regular-expression
  source. The results are plain strings; the guard still runs them through the
  same safety gate as any caller-supplied pattern.

How:
  Both transforms backslash-escape a fixed set of metacharacters with a single
  substitution. Globs then have their wildcards rewritten in a fixed order so
  earlier replacements never corrupt later ones.

Interfaces:
  :func:`escape_for_regex`, :func:`glob_to_pattern`.

Invariants & Safety:
  - ``escape_for_regex`` output contains no unescaped metacharacter, so every
    quantifier and group delimiter it emits is preceded by a backslash.
  - Glob brackets and braces are escaped along with the other metacharacters,
    so ``[...]`` and ``{a,b}`` match literally.
"""
from __future__ import annotations

import re


_LITERAL_SPECIALS = re.compile(r"[.*+?^${}()|\[\]\\]")
# ``*`` and ``?`` are glob syntax and survive the escape step.
_GLOB_SPECIALS = re.compile(r"[.+^${}()|\[\]\\]")
# Braces are escaped before the placeholder is inserted, so it cannot collide
# with text coming from the glob itself.
_GLOBSTAR_TOKEN = "{{GLOBSTAR}}"

SEGMENT_RUN = "[^/]*"
SEGMENT_CHAR = "[^/]"
ANY_RUN = ".*"


def escape_for_regex(text: str) -> str:
    """Escape ``. * + ? ^ $ { } ( ) | [ ] \\`` so ``text`` matches literally.

    >>> escape_for_regex("a.b*c")
    'a\\\\.b\\\\*c'
    """

    return _LITERAL_SPECIALS.sub(r"\\\g<0>", text)


def glob_to_pattern(glob: str) -> str:
    """Translate ``glob`` into an anchored regular-expression source string.

    What:
      Supports ``*`` (any run except ``/``), ``**`` (any run including
      ``/``) and ``?`` (one character except ``/``). Nothing else is glob
      syntax: brace lists such as ``{a,b}`` and bracket classes such as
      ``[abc]`` or ``[!abc]`` are escaped and match their own characters.

    How:
      1. Escape the metacharacters that are not glob syntax.
      2. Park every ``**`` behind a placeholder.
      3. Rewrite the remaining ``*`` and then ``?``.
      4. Swap the placeholder for ``.*``.
      5. Anchor with ``^`` and ``\\Z`` so the whole string must match.

    Args:
      glob: Glob expression, e.g. ``"**/*.md"``.

    Returns:
      Pattern source, e.g. ``"^.*/[^/]*\\.md\\Z"``.
    """

    body = _GLOB_SPECIALS.sub(r"\\\g<0>", glob)
    body = body.replace("**", _GLOBSTAR_TOKEN)
    body = body.replace("*", SEGMENT_RUN)
    body = body.replace("?", SEGMENT_CHAR)
    body = body.replace(_GLOBSTAR_TOKEN, ANY_RUN)
    return f"^{body}\\Z"
