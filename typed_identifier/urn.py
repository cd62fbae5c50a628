"""Canonical key (URN) construction.

Canonical keys are lowercase and colon-joined:

- ``<scheme>:<value>``               e.g. doi:10.1234/example
- ``generic:<label-key>:<value>``    e.g. generic:employee-id:emp12345
- ``generic:<value>``

The value portion is lowercased along with the rest, so a key is only ever
used for exact-match correlation, never for display.
"""

from __future__ import annotations

import re

GENERIC_SCHEME_ID = "generic"

_NON_ALNUM = re.compile(r"[^a-z0-9]+", re.IGNORECASE)
_GENERIC_LABELLED = re.compile(r"^generic:([^:]+):")


def sanitize_label_key(label_key: str) -> str:
    """Collapse runs of non-alphanumerics to one hyphen and trim hyphens."""
    return _NON_ALNUM.sub("-", label_key).strip("-")


def build_key(scheme_id: str, bare_value: str, label_key: str | None = None) -> str:
    """Build the canonical key for a resolved identifier."""
    if scheme_id.lower() != GENERIC_SCHEME_ID:
        return f"{scheme_id}:{bare_value}".lower()

    sanitized = sanitize_label_key(label_key) if label_key else ""
    if sanitized:
        return f"{GENERIC_SCHEME_ID}:{sanitized}:{bare_value}".lower()
    return f"{GENERIC_SCHEME_ID}:{bare_value}".lower()


def label_key_from_key(canonical_key: str) -> str | None:
    """Recover the sanitized label key from a stored ``generic:<key>:<value>``.

    A generic value that itself contains a colon and was stored without a
    label key reads back its first segment as the label key; keys are
    lossy by construction.
    """
    match = _GENERIC_LABELLED.match(canonical_key)
    return match.group(1) if match else None
