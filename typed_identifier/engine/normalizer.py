"""Strip scheme-specific decoration from raw identifier values.

Four input shapes are recognised, tried in order, first hit wins:

1. scheme token   "DOI:10.1234/x"            (case-insensitive on the token)
2. exact prefix   "https://doi.org/10.1234/x"
3. http variant   "http://doi.org/10.1234/x" (only for https:// prefixes)
4. bare           "10.1234/x"                (returned unchanged)

Anything after a stripped prefix, trailing slashes included, stays in the
bare value; rejecting it is the validator's job.
"""

from __future__ import annotations

from enum import Enum

from typed_identifier.schemes.models import SchemeDescriptor


class DecorationRule(str, Enum):
    scheme_token = "scheme_token"
    exact_prefix = "exact_prefix"
    protocol_swapped = "protocol_swapped"
    bare = "bare"


def protocol_variant(prefix: str) -> str | None:
    """Return the http:// form of an https:// prefix, or None."""
    if "https://" not in prefix:
        return None
    return prefix.replace("https://", "http://")


def strip_prefix(descriptor: SchemeDescriptor, value: str) -> tuple[str, DecorationRule] | None:
    """Strip the descriptor's URL prefix (exact, then http variant) if present."""
    if not descriptor.prefix:
        return None
    if value.startswith(descriptor.prefix):
        return value[len(descriptor.prefix):], DecorationRule.exact_prefix
    http_prefix = protocol_variant(descriptor.prefix)
    if http_prefix and value.startswith(http_prefix):
        return value[len(http_prefix):], DecorationRule.protocol_swapped
    return None


def normalize_with_rule(descriptor: SchemeDescriptor, raw_value: str) -> tuple[str, DecorationRule]:
    """Like normalize() but also report which rule fired."""
    token = descriptor.id.lower() + ":"
    if raw_value.lower().startswith(token):
        return raw_value[len(token):], DecorationRule.scheme_token

    stripped = strip_prefix(descriptor, raw_value)
    if stripped is not None:
        return stripped

    return raw_value, DecorationRule.bare


def normalize(descriptor: SchemeDescriptor, raw_value: str) -> str:
    """Return the bare value of *raw_value* for *descriptor*."""
    bare, _ = normalize_with_rule(descriptor, raw_value)
    return bare
