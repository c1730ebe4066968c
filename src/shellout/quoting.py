import re
from typing import Iterable

# Characters a POSIX shell never treats specially inside an unquoted word.
_UNSAFE = re.compile(r"[^\w@%+=:,./-]", re.ASCII)


def has_unsafe_content(value: str) -> bool:
    """Return True if `value` would need quoting to survive as one shell word."""
    if not value:
        return True
    return _UNSAFE.search(value) is not None


def quote(value: str) -> str:
    """
    Quote `value` so that a shell parses it back as exactly one word.

    Embedded single quotes close the quoting, emit an escaped quote and
    reopen it: ``it's`` becomes ``'it'\\''s'``.
    """
    if not has_unsafe_content(value):
        return value
    return "'" + value.replace("'", "'\\''") + "'"


def join(words: Iterable[str]) -> str:
    return " ".join(quote(word) for word in words)
