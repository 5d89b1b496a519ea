"""Repository/tag-safe identifiers.

Container repository names and tags only accept a narrow alphabet. ``sanitize``
maps arbitrary text onto ``[a-z0-9-_]``:

- ASCII uppercase letters are folded to lowercase;
- every other run of disallowed characters collapses to a single ``-``.

Classification happens on the original characters, so ``"A@#B"`` becomes
``"a-b"`` and ``"É"`` (not ``A-Z``) becomes ``"-"``.
"""

from __future__ import annotations

import re

_DISALLOWED_RUN = re.compile(r"[^a-z0-9\-_]+")
_UNFOLDABLE_RUN = re.compile(r"[^A-Z]+")


def _replace_run(match: re.Match[str]) -> str:
    return _UNFOLDABLE_RUN.sub("-", match.group(0)).lower()


def sanitize(value: str) -> str:
    """Return *value* rewritten to contain only ``[a-z0-9-_]``.

    >>> sanitize("Some r4ndom t@g with character$")
    'some-r4ndom-t-g-with-character-'
    >>> sanitize("README.md")
    'readme-md'
    """
    return _DISALLOWED_RUN.sub(_replace_run, value)


def is_safe(value: str) -> bool:
    """True if *value* is already a fixed point of :func:`sanitize`."""
    return _DISALLOWED_RUN.search(value) is None
