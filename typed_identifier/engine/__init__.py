"""Typed identifier engine - normalize, validate, classify and key identifiers.

Core components:
    normalize              - Strip scheme token / URL prefix decoration
    validate               - Anchored pattern or non-empty check
    IdentifierClassifier   - Three-stage cascade for untyped input
    build_key              - Lowercase canonical key (URN) construction
    IdentifierResolver     - Write-path façade composing the above
"""

from typed_identifier.engine.normalizer import DecorationRule, normalize, normalize_with_rule, protocol_variant
from typed_identifier.engine.validator import matches_pattern, validate
from typed_identifier.engine.classifier import Classification, IdentifierClassifier
from typed_identifier.urn import build_key, label_key_from_key, sanitize_label_key
from typed_identifier.engine.resolver import (
    IdentifierResolver,
    RejectReason,
    ResolutionContext,
    ResolutionResult,
    ResolutionState,
)

__all__ = [
    "DecorationRule",
    "normalize",
    "normalize_with_rule",
    "protocol_variant",
    "matches_pattern",
    "validate",
    "Classification",
    "IdentifierClassifier",
    "build_key",
    "label_key_from_key",
    "sanitize_label_key",
    "IdentifierResolver",
    "RejectReason",
    "ResolutionContext",
    "ResolutionResult",
    "ResolutionState",
]
