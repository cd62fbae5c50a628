"""Shared test fixtures for the typed_identifier test suite."""

import pytest

from typed_identifier.engine.classifier import IdentifierClassifier
from typed_identifier.engine.resolver import IdentifierResolver
from typed_identifier.schemes.models import GENERIC_SCHEME_ID, LabelResolution, SchemeDescriptor
from typed_identifier.schemes.registry import SchemeRegistry


GENERIC = SchemeDescriptor(
    id=GENERIC_SCHEME_ID,
    label="Custom",
    label_resolution=LabelResolution.catalog,
)


def _registry_of(*descriptors: SchemeDescriptor) -> SchemeRegistry:
    return SchemeRegistry([*descriptors, GENERIC])


@pytest.fixture
def make_registry():
    """Factory: registry of the given descriptors followed by the catch-all."""
    return _registry_of


@pytest.fixture(scope="session")
def registry():
    """Registry seeded with the built-in catalogue."""
    return SchemeRegistry.builtin()


@pytest.fixture
def classifier(registry):
    return IdentifierClassifier(registry)


@pytest.fixture
def resolver(registry):
    """Best-effort resolver over the built-in catalogue."""
    return IdentifierResolver(registry)


@pytest.fixture
def strict_resolver(registry):
    return IdentifierResolver(registry, strict=True)


@pytest.fixture
def doi():
    return SchemeDescriptor(
        id="doi",
        label="DOI",
        prefix="https://doi.org/",
        pattern=r"^10\.\d{4,}/[^\s]+$",
    )


@pytest.fixture
def openalex():
    return SchemeDescriptor(
        id="openalex",
        label="OpenAlex ID",
        prefix="https://openalex.org/",
        pattern=r"^[WAICVPFS]\d{2,10}$",
    )


@pytest.fixture
def sample_catalog_yaml(tmp_path):
    """A small YAML scheme catalogue on disk."""
    path = tmp_path / "schemes.yaml"
    path.write_text(
        "schemes:\n"
        "  - id: arxiv\n"
        "    label: arXiv\n"
        "    prefix: https://arxiv.org/abs/\n"
        "    pattern: '^\\d{4}\\.\\d{4,5}(v\\d+)?$'\n"
        "    description: arXiv preprint\n"
        "  - id: doi\n"
        "    label: Digital Object Identifier\n"
        "    prefix: https://doi.org/\n"
        "    pattern: '^10\\.\\d{4,}/\\S+$'\n",
        encoding="utf-8",
    )
    return path
