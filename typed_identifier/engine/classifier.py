"""Identifier classification - infer the scheme of an untyped string.

Runs a three-stage cascade over the registry, most confident first:

1. scheme token    "orcid:0000-0001-2345-6789"  -> split on the first colon, then strip
                                                  that scheme's URL prefix if present
2. URL prefix      "https://openalex.org/W123"   -> exact prefix, then http variant
3. pattern         "0000-0001-2345-6789"          -> first scheme whose pattern matches

Stages 2 and 3 walk the registry in registration order and stop at the first
hit, so reordering schemes changes which one claims an ambiguous value. The
catch-all scheme never takes part.
"""

from __future__ import annotations

import logging
import re
from dataclasses import asdict, dataclass
from typing import Any, Iterable, Iterator

from typed_identifier.engine.normalizer import strip_prefix
from typed_identifier.engine.validator import matches_pattern
from typed_identifier.schemes.models import GENERIC_SCHEME_ID
from typed_identifier.schemes.registry import SchemeRegistry

logger = logging.getLogger(__name__)

# Outer "key:" envelope, e.g. "id:https://openalex.org/W123".
_WRAPPER = re.compile(r"^([A-Za-z0-9_]+):(.+)$")


@dataclass(frozen=True)
class Classification:
    """Result of a successful classification.

    stage is one of "scheme_token", "prefix", "pattern".
    """

    scheme_id: str
    bare_value: str
    stage: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class IdentifierClassifier:
    """Attribute a scheme and bare value to arbitrary input strings."""

    def __init__(self, registry: SchemeRegistry) -> None:
        self._registry = registry

    def classify(self, raw_input: Any) -> Classification | None:
        """Classify *raw_input*; None when nothing matches.

        Never raises: empty or non-string input is simply unclassifiable.
        """
        if not isinstance(raw_input, str) or not raw_input:
            return None

        value = self._unwrap(raw_input)
        head, sep, _ = value.partition(":")
        if sep and head.lower() == GENERIC_SCHEME_ID:
            logger.debug("Catch-all input %r is never classified", raw_input)
            return None

        result = (
            self._match_scheme_token(value)
            or self._match_prefix(value)
            or self._match_pattern(value)
        )
        if result is None:
            logger.debug("No scheme matched %r", raw_input)
        else:
            logger.debug("Classified %r as %s via %s", raw_input, result.scheme_id, result.stage)
        return result

    def classify_many(self, raw_inputs: Iterable[Any]) -> Iterator[Classification | None]:
        """Classify each input, yielding results in input order."""
        for raw in raw_inputs:
            yield self.classify(raw)

    # -- Preprocessing --------------------------------------------------------

    def _unwrap(self, value: str) -> str:
        """Strip one leading ``key:`` envelope.

        Left alone when the key is itself a registered scheme id (the input
        is a scheme token for stage 1) or when the remainder starts with
        "//" (the key is a URL protocol such as http or https).
        """
        match = _WRAPPER.match(value)
        if match is None:
            return value
        key, remainder = match.group(1), match.group(2)
        if self._registry.exists(key) or remainder.startswith("//"):
            return value
        return remainder

    # -- Cascade stages -------------------------------------------------------

    def _match_scheme_token(self, value: str) -> Classification | None:
        if ":" not in value:
            return None
        scheme, _, bare = value.partition(":")
        descriptor = self._registry.get(scheme)
        if not bare or descriptor is None:
            return None
        # "doi:https://doi.org/10.1/x" still carries the scheme's URL prefix
        stripped = strip_prefix(descriptor, bare)
        if stripped is not None and stripped[0]:
            bare = stripped[0]
        return Classification(descriptor.id, bare, "scheme_token")

    def _match_prefix(self, value: str) -> Classification | None:
        for descriptor in self._registry.classifiable():
            stripped = strip_prefix(descriptor, value)
            if stripped is None:
                continue
            bare, _ = stripped
            if bare:
                return Classification(descriptor.id, bare, "prefix")
        return None

    def _match_pattern(self, value: str) -> Classification | None:
        # Tested against the unstripped value; decorated input is only
        # claimed here if a pattern accepts the decoration itself.
        for descriptor in self._registry.classifiable():
            if descriptor.pattern and matches_pattern(descriptor.pattern, value):
                return Classification(descriptor.id, value, "pattern")
        return None
