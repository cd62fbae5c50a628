"""Pattern validation for bare identifier values."""

from __future__ import annotations

import re
from functools import lru_cache

from typed_identifier.schemes.models import SchemeDescriptor


@lru_cache(maxsize=256)
def _compile(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern)


def matches_pattern(pattern: str, value: str) -> bool:
    """Full-string match of *value* against *pattern*.

    Anchored with fullmatch regardless of whether the pattern text carries
    its own ^...$, so "10.1234/x trailing" never passes on a substring hit.
    """
    return _compile(pattern).fullmatch(value) is not None


def validate(descriptor: SchemeDescriptor, bare_value: str) -> bool:
    """Return True if *bare_value* is acceptable for *descriptor*.

    Empty values are always rejected. Without a pattern (the catch-all and
    other free-form schemes) any non-empty string is accepted.
    """
    if not isinstance(bare_value, str) or not bare_value:
        return False
    if not descriptor.pattern:
        return True
    return matches_pattern(descriptor.pattern, bare_value)
