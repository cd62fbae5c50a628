"""Data model for identifier schemes and resolved identifier values.

A SchemeDescriptor is the immutable description of one registered scheme
(DOI, ORCID, ...). An IdentifierValue is the record produced for one
(type, value) pair once its scheme is resolved and its value normalized.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Iterable, Iterator, Mapping

from typed_identifier.urn import GENERIC_SCHEME_ID, build_key


class LabelResolution(str, Enum):
    """How the display label of a value is derived.

    static: always the descriptor label.
    catalog: looked up in a caller-supplied GenericLabelCatalog by label key,
        falling back to the descriptor label.
    """
    static = "static"
    catalog = "catalog"


class UniquenessScope(str, Enum):
    none = "none"
    per_container = "perContainer"
    per_group = "perGroup"


@dataclass(frozen=True)
class SchemeDescriptor:
    """A single registered identifier scheme.

    Attributes:
        id: Stable lowercase identifier (e.g., "doi"); never contains a colon
        label: Display name
        prefix: Canonical URL prefix, or "" when the scheme has none
        pattern: Validation regex, or "" to accept any non-empty value
        description: Free text
        label_resolution: Label derivation strategy (see LabelResolution)
    """

    id: str
    label: str = ""
    prefix: str = ""
    pattern: str = ""
    description: str = ""
    label_resolution: LabelResolution = LabelResolution.static

    @property
    def is_catch_all(self) -> bool:
        return self.id == GENERIC_SCHEME_ID

    def build_url(self, bare_value: str) -> str:
        """Return the resolvable URL for *bare_value*, or the value itself."""
        if not self.prefix:
            return bare_value
        return self.prefix + bare_value

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["label_resolution"] = self.label_resolution.value
        return data


@dataclass(frozen=True)
class SchemeRef:
    """A requested scheme: base id plus optional catch-all label key.

    The colon-joined ``generic:<label_key>`` string only exists at the
    storage/UI boundary; use parse() and serialize() to cross it.
    """

    base_scheme_id: str
    label_key: str | None = None

    @classmethod
    def parse(cls, value: str) -> SchemeRef:
        """Split a boundary string such as ``"generic:employee_id"``.

        Only the catch-all id may carry a label key. Any other string is
        returned whole as the base id (and will fail registry lookup if it
        contains a colon).
        """
        if ":" in value:
            base, _, key = value.partition(":")
            if base.lower() == GENERIC_SCHEME_ID and key:
                return cls(GENERIC_SCHEME_ID, key)
        return cls(value.lower())

    def serialize(self) -> str:
        if self.label_key:
            return f"{self.base_scheme_id}:{self.label_key}"
        return self.base_scheme_id


@dataclass(frozen=True)
class IdentifierValue:
    """A resolved identifier.

    canonical_key is derived from the other fields on every access, so it
    can never drift from them.
    """

    scheme_id: str
    bare_value: str
    label_key: str | None = None

    def __post_init__(self) -> None:
        if not self.bare_value:
            raise ValueError("bare_value must not be empty")
        if self.label_key is not None and self.scheme_id != GENERIC_SCHEME_ID:
            raise ValueError("label_key is only allowed on the generic scheme")

    @property
    def canonical_key(self) -> str:
        return build_key(self.scheme_id, self.bare_value, self.label_key)

    @property
    def pair(self) -> tuple[str, str]:
        return (self.scheme_id, self.bare_value)

    def to_dict(self) -> dict[str, Any]:
        return {
            "scheme_id": self.scheme_id,
            "bare_value": self.bare_value,
            "label_key": self.label_key,
            "canonical_key": self.canonical_key,
        }


class GenericLabelCatalog(Mapping[str, str]):
    """Ordered, read-only ``label_key -> display_label`` mapping for one field."""

    def __init__(self, entries: Iterable[tuple[str, str]] | Mapping[str, str] = ()) -> None:
        items = entries.items() if isinstance(entries, Mapping) else entries
        self._labels: dict[str, str] = {}
        for key, label in items:
            self._labels.setdefault(key, label)

    def __getitem__(self, key: str) -> str:
        return self._labels[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._labels)

    def __len__(self) -> int:
        return len(self._labels)

    def __repr__(self) -> str:
        return f"GenericLabelCatalog({self._labels!r})"

    def first_key(self) -> str | None:
        return next(iter(self._labels), None)

    def to_text(self) -> str:
        """Format as the line-oriented ``key|label`` configuration text."""
        return "\n".join(f"{k}|{v}" for k, v in self._labels.items())


@dataclass(frozen=True)
class FieldPolicy:
    """Per-field configuration consumed by the uniqueness collaborator."""

    uniqueness_scope: UniquenessScope = UniquenessScope.per_container
    allowed_schemes: frozenset[str] = field(default_factory=frozenset)

    def allows(self, scheme_id: str) -> bool:
        """Empty allowed_schemes means unrestricted."""
        if not self.allowed_schemes:
            return True
        return scheme_id.lower() in {s.lower() for s in self.allowed_schemes}
