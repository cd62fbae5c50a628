"""Resolution façade - the write path for typed identifiers.

Every write runs the full state machine:

    Received -> SchemeResolved -> Normalized -> Validated -> KeyBuilt
                      |                              |
                      +--> Rejected(UnknownScheme)   +--> Rejected(InvalidFormat)

Empty input is rejected immediately. In best-effort mode rejections come
back as ResolutionResult values; in strict mode they are raised as
ResolutionError subclasses carrying the same result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from typed_identifier.engine.classifier import Classification, IdentifierClassifier
from typed_identifier.engine.normalizer import normalize
from typed_identifier.urn import build_key, label_key_from_key, sanitize_label_key
from typed_identifier.engine.validator import validate
from typed_identifier.errors import EmptyInputError, InvalidFormatError, UnknownSchemeError
from typed_identifier.schemes.models import (
    GenericLabelCatalog,
    IdentifierValue,
    LabelResolution,
    SchemeRef,
)
from typed_identifier.schemes.registry import SchemeRegistry
from typed_identifier.settings import TypedIdentifierSettings, get_settings

logger = logging.getLogger(__name__)

EMPTY_VALUE_MESSAGE = "The identifier value cannot be empty when an identifier type is selected."


class ResolutionState(str, Enum):
    received = "received"
    scheme_resolved = "scheme_resolved"
    normalized = "normalized"
    validated = "validated"
    key_built = "key_built"
    rejected = "rejected"


class RejectReason(str, Enum):
    unknown_scheme = "unknown_scheme"
    invalid_format = "invalid_format"
    empty_input = "empty_input"


@dataclass(frozen=True)
class ResolutionContext:
    """Per-call options for resolve().

    label_catalog: catalog of the field being written; its first key is the
        default label key for catch-all values written without one.
    strict: raise instead of returning rejections. None defers to the
        resolver's default.
    """

    label_catalog: GenericLabelCatalog | None = None
    strict: bool | None = None


@dataclass(frozen=True)
class ResolutionResult:
    """Outcome of one resolve() call.

    On success ``identifier`` is set. On InvalidFormat the normalized
    ``bare_value`` is still reported so the caller may store it, but no
    canonical key exists for it.
    """

    state: ResolutionState
    requested: str
    raw_value: Any
    scheme_id: str | None = None
    bare_value: str | None = None
    label_key: str | None = None
    identifier: IdentifierValue | None = None
    reason: RejectReason | None = None

    @property
    def ok(self) -> bool:
        return self.state is ResolutionState.key_built

    @property
    def canonical_key(self) -> str | None:
        return self.identifier.canonical_key if self.identifier else None

    @property
    def message(self) -> str:
        """User-facing message; distinct per rejection kind."""
        if self.reason is RejectReason.unknown_scheme:
            return f"Unknown identifier type: {self.requested}"
        if self.reason is RejectReason.invalid_format:
            return f'The value "{self.raw_value}" is not a valid {self.requested} identifier.'
        if self.reason is RejectReason.empty_input:
            return EMPTY_VALUE_MESSAGE
        return ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "state": self.state.value,
            "requested": self.requested,
            "scheme_id": self.scheme_id,
            "bare_value": self.bare_value,
            "label_key": self.label_key,
            "canonical_key": self.canonical_key,
            "reason": self.reason.value if self.reason else None,
            "message": self.message,
        }


class IdentifierResolver:
    """Compose registry, normalizer, validator, classifier and key builder.

    All collaborators are injected; the resolver holds no mutable state.
    """

    def __init__(
        self,
        registry: SchemeRegistry,
        *,
        classifier: IdentifierClassifier | None = None,
        strict: bool = False,
    ) -> None:
        self._registry = registry
        self._classifier = classifier or IdentifierClassifier(registry)
        self._strict = strict

    @classmethod
    def from_settings(cls, settings: TypedIdentifierSettings | None = None) -> IdentifierResolver:
        """Build a resolver (and its registry) from TypedIdentifierSettings."""
        if settings is None:
            settings = get_settings()
        return cls(SchemeRegistry.from_settings(settings), strict=settings.strict)

    @property
    def registry(self) -> SchemeRegistry:
        return self._registry

    # -- Consumer-facing operations -------------------------------------------

    def classify(self, raw_input: Any) -> Classification | None:
        return self._classifier.classify(raw_input)

    def build_key(self, scheme_id: str, bare_value: str, label_key: str | None = None) -> str:
        return build_key(scheme_id, bare_value, label_key)

    def resolve(
        self,
        scheme: str | SchemeRef,
        raw_value: Any,
        context: ResolutionContext | None = None,
    ) -> ResolutionResult:
        """Resolve a typed value into an IdentifierValue.

        *scheme* is a scheme id, a boundary compound such as
        ``"generic:employee_id"``, or a SchemeRef.
        """
        context = context or ResolutionContext()
        strict = self._strict if context.strict is None else context.strict
        ref = scheme if isinstance(scheme, SchemeRef) else SchemeRef.parse(scheme or "")
        requested = ref.serialize() if isinstance(scheme, SchemeRef) else (scheme or "")

        # Received
        if not isinstance(raw_value, str) or not raw_value:
            return self._reject(
                ResolutionResult(
                    state=ResolutionState.rejected,
                    requested=requested,
                    raw_value=raw_value,
                    reason=RejectReason.empty_input,
                ),
                strict,
            )

        # SchemeResolved
        descriptor = self._registry.get(ref.base_scheme_id)
        if descriptor is None:
            return self._reject(
                ResolutionResult(
                    state=ResolutionState.rejected,
                    requested=requested,
                    raw_value=raw_value,
                    reason=RejectReason.unknown_scheme,
                ),
                strict,
            )

        label_key = ref.label_key
        if descriptor.is_catch_all and not label_key and context.label_catalog:
            label_key = context.label_catalog.first_key()

        # Normalized
        bare_value = normalize(descriptor, raw_value)

        # Validated
        if not validate(descriptor, bare_value):
            return self._reject(
                ResolutionResult(
                    state=ResolutionState.rejected,
                    requested=requested,
                    raw_value=raw_value,
                    scheme_id=descriptor.id,
                    bare_value=bare_value,
                    label_key=label_key,
                    reason=RejectReason.invalid_format,
                ),
                strict,
            )

        # KeyBuilt
        identifier = IdentifierValue(descriptor.id, bare_value, label_key)
        return ResolutionResult(
            state=ResolutionState.key_built,
            requested=requested,
            raw_value=raw_value,
            scheme_id=descriptor.id,
            bare_value=bare_value,
            label_key=label_key,
            identifier=identifier,
        )

    def resolve_untyped(self, raw_input: Any, context: ResolutionContext | None = None) -> ResolutionResult | None:
        """Classify *raw_input* and resolve it; None when unclassifiable."""
        found = self.classify(raw_input)
        if found is None:
            return None
        return self.resolve(found.scheme_id, found.bare_value, context)

    # -- Presentation helpers -------------------------------------------------

    def label_for(self, identifier: IdentifierValue, catalog: GenericLabelCatalog | None = None) -> str:
        """Display label for *identifier*.

        Catalog-resolved schemes use the catalog entry for the identifier's
        label key when there is one.
        """
        descriptor = self._registry.lookup(identifier.scheme_id)
        if (
            descriptor.label_resolution is LabelResolution.catalog
            and catalog
            and identifier.label_key
            and identifier.label_key in catalog
        ):
            return catalog[identifier.label_key]
        return descriptor.label

    def label_for_key(self, canonical_key: str, catalog: GenericLabelCatalog | None = None) -> str | None:
        """Display label from a stored canonical key alone.

        Label keys are sanitized and lowercased inside canonical keys, so
        catalog keys are compared in that form.
        """
        scheme_id, sep, _ = canonical_key.partition(":")
        descriptor = self._registry.get(scheme_id)
        if descriptor is None or not sep:
            return None
        if descriptor.label_resolution is LabelResolution.catalog and catalog:
            stored = label_key_from_key(canonical_key)
            if stored:
                for key, label in catalog.items():
                    if sanitize_label_key(key).lower() == stored:
                        return label
        return descriptor.label

    def build_url(self, identifier: IdentifierValue) -> str:
        return self._registry.lookup(identifier.scheme_id).build_url(identifier.bare_value)

    # -- internal -------------------------------------------------------------

    @staticmethod
    def _reject(result: ResolutionResult, strict: bool) -> ResolutionResult:
        logger.debug("Rejected %r for %r: %s", result.raw_value, result.requested, result.reason.value)
        if not strict:
            return result
        if result.reason is RejectReason.unknown_scheme:
            raise UnknownSchemeError(result.requested, result)
        if result.reason is RejectReason.invalid_format:
            raise InvalidFormatError(result.requested, result.raw_value, result)
        raise EmptyInputError(result.message, result)
