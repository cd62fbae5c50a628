"""Identifier scheme catalogue: data model, built-ins, loader and registry."""

from typed_identifier.schemes.models import (
    GENERIC_SCHEME_ID,
    FieldPolicy,
    GenericLabelCatalog,
    IdentifierValue,
    LabelResolution,
    SchemeDescriptor,
    SchemeRef,
    UniquenessScope,
)
from typed_identifier.schemes.builtin import BUILTIN_SCHEMES
from typed_identifier.schemes.loader import load_scheme_file, merge_schemes, parse_label_catalog
from typed_identifier.schemes.registry import SchemeRegistry

__all__ = [
    "GENERIC_SCHEME_ID",
    "BUILTIN_SCHEMES",
    "FieldPolicy",
    "GenericLabelCatalog",
    "IdentifierValue",
    "LabelResolution",
    "SchemeDescriptor",
    "SchemeRef",
    "UniquenessScope",
    "SchemeRegistry",
    "load_scheme_file",
    "merge_schemes",
    "parse_label_catalog",
]
