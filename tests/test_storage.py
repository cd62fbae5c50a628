"""Tests for the in-memory uniqueness index."""

import threading

import pytest

from typed_identifier.errors import DuplicateIdentifierError
from typed_identifier.schemes.models import FieldPolicy, IdentifierValue, UniquenessScope
from typed_identifier.storage import InMemoryIdentifierIndex


DOI = IdentifierValue("doi", "10.1234/example")

NONE = FieldPolicy(uniqueness_scope=UniquenessScope.none)
PER_CONTAINER = FieldPolicy(uniqueness_scope=UniquenessScope.per_container)
PER_GROUP = FieldPolicy(uniqueness_scope=UniquenessScope.per_group)


@pytest.fixture
def index():
    idx = InMemoryIdentifierIndex()
    idx.add(DOI, "item-1", "collection-a")
    return idx


class TestScopes:
    def test_none_scope_never_duplicates(self, index):
        assert not index.exists(NONE, DOI, "item-1", "collection-a")

    def test_per_container_same_container(self, index):
        assert index.exists(PER_CONTAINER, DOI, "item-1", "collection-a")

    def test_per_container_other_container(self, index):
        assert not index.exists(PER_CONTAINER, DOI, "item-2", "collection-a")

    def test_per_group_same_group(self, index):
        assert index.exists(PER_GROUP, DOI, "item-2", "collection-a")

    def test_per_group_other_group(self, index):
        assert not index.exists(PER_GROUP, DOI, "item-2", "collection-b")

    def test_different_value_is_unique(self, index):
        other = IdentifierValue("doi", "10.1234/other")
        assert not index.exists(PER_GROUP, other, "item-2", "collection-a")

    def test_compared_on_stored_pair(self, index):
        # bare values are compared as stored, not by canonical key
        upper = IdentifierValue("doi", "10.1234/EXAMPLE")
        assert not index.exists(PER_CONTAINER, upper, "item-1", "collection-a")

    def test_label_key_ignored(self):
        idx = InMemoryIdentifierIndex()
        idx.add(IdentifierValue("generic", "EMP1", "employee_id"), "item-1")
        assert idx.exists(PER_CONTAINER, IdentifierValue("generic", "EMP1", "badge"), "item-1")


class TestMessages:
    def test_same_container_message(self, index):
        assert index.violation_message(PER_CONTAINER, DOI, "item-1", "collection-a") == (
            "The identifier doi:10.1234/example already exists in this container."
        )

    def test_other_container_message(self, index):
        assert index.violation_message(PER_GROUP, DOI, "item-2", "collection-a") == (
            "The identifier doi:10.1234/example already exists in another container."
        )

    def test_unique_has_no_message(self, index):
        assert index.violation_message(PER_CONTAINER, DOI, "item-9", "collection-a") is None


class TestWrites:
    def test_enforce_raises(self, index):
        with pytest.raises(DuplicateIdentifierError) as exc:
            index.add(DOI, "item-2", "collection-a", policy=PER_GROUP, enforce=True)
        assert exc.value.scheme_id == "doi"
        assert exc.value.bare_value == "10.1234/example"
        assert index.count() == 1

    def test_without_enforce_duplicates_allowed(self, index):
        index.add(DOI, "item-1", "collection-a")
        assert index.count() == 2

    def test_remove(self, index):
        assert index.remove(DOI, "item-1", "collection-a")
        assert not index.remove(DOI, "item-1", "collection-a")
        assert index.count() == 0
        assert not index.exists(PER_CONTAINER, DOI, "item-1", "collection-a")

    def test_remove_one_occurrence(self, index):
        index.add(DOI, "item-1", "collection-a")
        index.remove(DOI, "item-1", "collection-a")
        assert index.exists(PER_CONTAINER, DOI, "item-1", "collection-a")

    def test_clear_container(self, index):
        index.add(DOI, "item-2", "collection-a")
        index.clear_container("item-1", "collection-a")
        assert index.containers_with(DOI) == ["item-2"]

    def test_clear(self, index):
        index.clear()
        assert index.count() == 0


class TestQueries:
    def test_containers_with(self, index):
        index.add(DOI, "item-2", "collection-b")
        assert sorted(index.containers_with(DOI)) == ["item-1", "item-2"]
        assert index.containers_with(DOI, group_id="collection-b") == ["item-2"]

    def test_concurrent_enforced_adds(self):
        idx = InMemoryIdentifierIndex()
        errors = []

        def worker(n):
            try:
                idx.add(DOI, f"item-{n}", "collection-a", policy=PER_GROUP, enforce=True)
            except DuplicateIdentifierError as e:
                errors.append(e)

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(20)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert idx.count() == 1
        assert len(errors) == 19
