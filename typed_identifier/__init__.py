"""
typed_identifier
Classify, normalize, validate and canonically key typed identifiers
(DOI, ORCID, OpenAlex, ISBN, ... and a labelled catch-all scheme).
"""

__version__ = "0.1.0"

from typed_identifier.schemes import (
    GENERIC_SCHEME_ID,
    FieldPolicy,
    GenericLabelCatalog,
    IdentifierValue,
    SchemeDescriptor,
    SchemeRef,
    SchemeRegistry,
    UniquenessScope,
    parse_label_catalog,
)
from typed_identifier.engine import (
    Classification,
    IdentifierClassifier,
    IdentifierResolver,
    RejectReason,
    ResolutionContext,
    ResolutionResult,
    build_key,
    normalize,
    validate,
)
from typed_identifier.storage import InMemoryIdentifierIndex

__all__ = [
    "GENERIC_SCHEME_ID",
    "FieldPolicy",
    "GenericLabelCatalog",
    "IdentifierValue",
    "SchemeDescriptor",
    "SchemeRef",
    "SchemeRegistry",
    "UniquenessScope",
    "parse_label_catalog",
    "Classification",
    "IdentifierClassifier",
    "IdentifierResolver",
    "RejectReason",
    "ResolutionContext",
    "ResolutionResult",
    "build_key",
    "normalize",
    "validate",
    "InMemoryIdentifierIndex",
]
