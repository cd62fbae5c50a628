"""Scheme registry - read-only catalogue of SchemeDescriptor objects.

Built once at startup and never mutated afterwards, so a single instance can
be shared by any number of concurrent callers without locking.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, Iterator

from typed_identifier.errors import SchemeConfigError, UnknownSchemeError
from typed_identifier.schemes.builtin import BUILTIN_SCHEMES
from typed_identifier.schemes.loader import load_scheme_file, merge_schemes
from typed_identifier.schemes.models import GENERIC_SCHEME_ID, SchemeDescriptor

if TYPE_CHECKING:
    from typed_identifier.settings import TypedIdentifierSettings

logger = logging.getLogger(__name__)


class SchemeRegistry:
    """Ordered catalogue of identifier schemes.

    Registration order is preserved and is the tie-break order used by
    classification. The catch-all ``generic`` scheme must be present.
    """

    def __init__(self, descriptors: Iterable[SchemeDescriptor]) -> None:
        self._schemes: dict[str, SchemeDescriptor] = {}

        for descriptor in descriptors:
            self._check(descriptor)
            if descriptor.id in self._schemes:
                raise SchemeConfigError(f"Duplicate scheme id: {descriptor.id}")
            self._schemes[descriptor.id] = descriptor

        if GENERIC_SCHEME_ID not in self._schemes:
            raise SchemeConfigError(
                f"Scheme catalogue must include the catch-all '{GENERIC_SCHEME_ID}' scheme"
            )

        logger.info("Registered %d identifier schemes", len(self._schemes))

    @classmethod
    def builtin(cls) -> SchemeRegistry:
        return cls(BUILTIN_SCHEMES)

    @classmethod
    def from_file(cls, path: Path | str, *, include_builtin: bool = True) -> SchemeRegistry:
        """Build a registry from a catalogue file, optionally over the built-ins."""
        loaded = load_scheme_file(path)
        if include_builtin:
            return cls(merge_schemes(BUILTIN_SCHEMES, loaded))
        return cls(loaded)

    @classmethod
    def from_settings(cls, settings: TypedIdentifierSettings) -> SchemeRegistry:
        if settings.schemes_path is None:
            return cls.builtin()
        return cls.from_file(settings.schemes_path, include_builtin=settings.include_builtin_schemes)

    # -- Lookup ---------------------------------------------------------------

    def get(self, scheme_id: str) -> SchemeDescriptor | None:
        """Return a descriptor by id (case-insensitive), or None."""
        if not scheme_id:
            return None
        return self._schemes.get(scheme_id.lower())

    def lookup(self, scheme_id: str) -> SchemeDescriptor:
        """Return a descriptor by id. Raises UnknownSchemeError if absent."""
        descriptor = self.get(scheme_id)
        if descriptor is None:
            raise UnknownSchemeError(scheme_id)
        return descriptor

    def exists(self, scheme_id: str) -> bool:
        return self.get(scheme_id) is not None

    def list(self) -> list[SchemeDescriptor]:
        """Return all descriptors in registration order."""
        return list(self._schemes.values())

    def ids(self) -> list[str]:
        return list(self._schemes)

    def classifiable(self) -> list[SchemeDescriptor]:
        """Descriptors eligible for classification (everything but the catch-all)."""
        return [d for d in self._schemes.values() if not d.is_catch_all]

    @property
    def catch_all(self) -> SchemeDescriptor:
        return self._schemes[GENERIC_SCHEME_ID]

    def count(self) -> int:
        return len(self._schemes)

    def __contains__(self, scheme_id: object) -> bool:
        return isinstance(scheme_id, str) and self.exists(scheme_id)

    def __iter__(self) -> Iterator[SchemeDescriptor]:
        return iter(self.list())

    def __len__(self) -> int:
        return len(self._schemes)

    # -- internal -------------------------------------------------------------

    @staticmethod
    def _check(descriptor: SchemeDescriptor) -> None:
        if not descriptor.id:
            raise SchemeConfigError("Scheme id must not be empty")
        if ":" in descriptor.id:
            raise SchemeConfigError(f"Scheme id must not contain a colon: {descriptor.id}")
        if descriptor.id != descriptor.id.lower():
            raise SchemeConfigError(f"Scheme id must be lowercase: {descriptor.id}")
        if descriptor.pattern:
            try:
                re.compile(descriptor.pattern)
            except re.error as e:
                raise SchemeConfigError(
                    f"Scheme {descriptor.id} has an invalid pattern: {e}"
                ) from e
