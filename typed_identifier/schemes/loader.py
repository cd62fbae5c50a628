"""Load scheme catalogues and generic label catalogs from configuration.

Scheme files are YAML (``.yaml``/``.yml``) or JSON with a top-level
``schemes`` list. Entries are validated with pydantic before they become
SchemeDescriptor objects.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any, Iterable

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from typed_identifier.errors import SchemeConfigError
from typed_identifier.schemes.models import (
    GenericLabelCatalog,
    LabelResolution,
    SchemeDescriptor,
)

logger = logging.getLogger(__name__)


class SchemeConfig(BaseModel):
    id: str = Field(..., min_length=1)
    label: str = ""
    prefix: str = ""
    pattern: str = ""
    description: str = ""
    label_resolution: LabelResolution = LabelResolution.static

    @field_validator("id")
    @classmethod
    def normalise_id(cls, v: str) -> str:
        value = v.strip().lower()
        if not value:
            raise ValueError("Scheme id must not be blank")
        if ":" in value:
            raise ValueError(f"Scheme id must not contain a colon: {v}")
        return value

    @field_validator("label", "prefix", "pattern", "description", mode="before")
    @classmethod
    def coerce_none_to_empty(cls, v):
        return v if v is not None else ""

    @field_validator("pattern")
    @classmethod
    def pattern_compiles(cls, v: str) -> str:
        if v:
            try:
                re.compile(v)
            except re.error as e:
                raise ValueError(f"Invalid pattern {v!r}: {e}") from e
        return v

    def to_descriptor(self) -> SchemeDescriptor:
        return SchemeDescriptor(
            id=self.id,
            label=self.label or self.id,
            prefix=self.prefix,
            pattern=self.pattern,
            description=self.description,
            label_resolution=self.label_resolution,
        )


class SchemeCatalogConfig(BaseModel):
    schemes: list[SchemeConfig] = Field(default_factory=list)


def _read_mapping(path: Path) -> dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SchemeConfigError(f"Cannot read scheme catalogue {path}: {e}") from e

    try:
        if path.suffix.lower() in (".yaml", ".yml"):
            data = yaml.safe_load(text) or {}
        else:
            data = json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise SchemeConfigError(f"Cannot parse scheme catalogue {path}: {e}") from e

    if not isinstance(data, dict):
        raise SchemeConfigError(f"{path}: expected a mapping with a 'schemes' list")
    return data


def load_scheme_file(path: Path | str) -> list[SchemeDescriptor]:
    """Load descriptors from a YAML or JSON catalogue, preserving file order."""
    path = Path(path)
    data = _read_mapping(path)
    try:
        catalog = SchemeCatalogConfig.model_validate(data)
    except ValidationError as e:
        raise SchemeConfigError(f"{path}: invalid scheme catalogue\n{e}") from e

    descriptors = [entry.to_descriptor() for entry in catalog.schemes]
    logger.info("Loaded %d scheme definitions from %s", len(descriptors), path)
    return descriptors


def merge_schemes(
    base: Iterable[SchemeDescriptor],
    overrides: Iterable[SchemeDescriptor],
) -> list[SchemeDescriptor]:
    """Overlay *overrides* on *base*.

    A matching id replaces the base entry in place so the classification
    order is unchanged; new ids are appended in override order.
    """
    merged: dict[str, SchemeDescriptor] = {d.id: d for d in base}
    for descriptor in overrides:
        merged[descriptor.id] = descriptor
    return list(merged.values())


def parse_label_catalog(text: str | None) -> GenericLabelCatalog:
    """Parse ``key|Label`` lines into a GenericLabelCatalog.

    Blank lines, lines without a pipe, and lines with an empty key or label
    are skipped. The first occurrence of a key wins.
    """
    if not text:
        return GenericLabelCatalog()

    entries: list[tuple[str, str]] = []
    for line in text.strip().splitlines():
        line = line.strip()
        if not line or "|" not in line:
            continue
        key, _, label = line.partition("|")
        key, label = key.strip(), label.strip()
        if key and label:
            entries.append((key, label))
    return GenericLabelCatalog(entries)
