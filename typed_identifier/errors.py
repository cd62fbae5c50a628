"""Exception hierarchy for typed_identifier.

Expected negative outcomes (no classification match, invalid format,
unknown scheme in best-effort mode) are returned as values, not raised.
The exceptions below cover strict-mode resolution, duplicate rejection in
the reference index, and broken configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typed_identifier.engine.resolver import ResolutionResult


class TypedIdentifierError(Exception):
    """Base exception for typed_identifier"""
    pass


class SchemeConfigError(TypedIdentifierError):
    """Scheme catalogue is malformed; raised at startup"""
    pass


class ResolutionError(TypedIdentifierError):
    """A strict-mode resolution was rejected.

    The rejected ResolutionResult is available on ``result`` so callers can
    still store the normalized value without a canonical key.
    """

    def __init__(self, message: str, result: ResolutionResult | None = None) -> None:
        super().__init__(message)
        self.result = result


class UnknownSchemeError(ResolutionError):
    def __init__(self, scheme_id: str, result: ResolutionResult | None = None) -> None:
        super().__init__(f"Unknown identifier type: {scheme_id}", result)
        self.scheme_id = scheme_id


class InvalidFormatError(ResolutionError):
    def __init__(self, scheme_id: str, raw_value: str, result: ResolutionResult | None = None) -> None:
        super().__init__(f'The value "{raw_value}" is not a valid {scheme_id} identifier.', result)
        self.scheme_id = scheme_id
        self.raw_value = raw_value


class EmptyInputError(ResolutionError):
    pass


class DuplicateIdentifierError(TypedIdentifierError):
    """Candidate already exists within the field's uniqueness scope"""

    def __init__(self, message: str, scheme_id: str, bare_value: str) -> None:
        super().__init__(message)
        self.scheme_id = scheme_id
        self.bare_value = bare_value
