"""In-memory uniqueness index for resolved identifiers.

Reference implementation of the storage collaborator: it records which
(scheme, value) pairs each container holds and answers existence checks
under a field's uniqueness scope. The engine itself never touches it.
"""

from __future__ import annotations

import threading
from collections import Counter

from typed_identifier.errors import DuplicateIdentifierError
from typed_identifier.schemes.models import FieldPolicy, IdentifierValue, UniquenessScope
from typed_identifier.utils import get_logger

logger = get_logger(__name__)

_Pair = tuple[str, str]
_ContainerKey = tuple[str, str]


class InMemoryIdentifierIndex:
    """Thread-safe index of identifier pairs per (group_id, container_id).

    Pairs are compared on (scheme_id, bare_value) exactly as stored; the
    catch-all label key does not take part in uniqueness.
    """

    def __init__(self) -> None:
        self._containers: dict[_ContainerKey, Counter[_Pair]] = {}
        self._lock = threading.Lock()

    # -- Writes ---------------------------------------------------------------

    def add(
        self,
        identifier: IdentifierValue,
        container_id: str,
        group_id: str = "",
        *,
        policy: FieldPolicy | None = None,
        enforce: bool = False,
    ) -> None:
        """Record *identifier* on a container.

        With ``enforce=True`` the policy scope is checked under the same
        lock and DuplicateIdentifierError is raised on a clash.
        """
        policy = policy or FieldPolicy()
        with self._lock:
            if enforce:
                message = self._violation(policy, identifier, container_id, group_id)
                if message:
                    raise DuplicateIdentifierError(message, identifier.scheme_id, identifier.bare_value)
            counter = self._containers.setdefault((group_id, container_id), Counter())
            counter[identifier.pair] += 1

    def remove(self, identifier: IdentifierValue, container_id: str, group_id: str = "") -> bool:
        """Remove one occurrence. Returns True if it existed."""
        with self._lock:
            counter = self._containers.get((group_id, container_id))
            if not counter or counter[identifier.pair] == 0:
                return False
            counter[identifier.pair] -= 1
            if counter[identifier.pair] == 0:
                del counter[identifier.pair]
            return True

    def clear_container(self, container_id: str, group_id: str = "") -> None:
        with self._lock:
            self._containers.pop((group_id, container_id), None)

    def clear(self) -> None:
        with self._lock:
            self._containers.clear()

    # -- Queries --------------------------------------------------------------

    def exists(
        self,
        policy: FieldPolicy,
        identifier: IdentifierValue,
        container_id: str,
        group_id: str = "",
    ) -> bool:
        """True if adding *identifier* would duplicate one within the policy scope."""
        with self._lock:
            return self._violation(policy, identifier, container_id, group_id) is not None

    def violation_message(
        self,
        policy: FieldPolicy,
        identifier: IdentifierValue,
        container_id: str,
        group_id: str = "",
    ) -> str | None:
        """User-facing duplicate message, or None when the candidate is unique."""
        with self._lock:
            return self._violation(policy, identifier, container_id, group_id)

    def containers_with(self, identifier: IdentifierValue, group_id: str | None = None) -> list[str]:
        """Container ids holding *identifier*, optionally limited to one group."""
        with self._lock:
            return [
                cid
                for (gid, cid), counter in self._containers.items()
                if counter[identifier.pair] and (group_id is None or gid == group_id)
            ]

    def count(self) -> int:
        """Total number of stored pair occurrences."""
        with self._lock:
            return sum(sum(c.values()) for c in self._containers.values())

    # -- internal -------------------------------------------------------------

    def _violation(
        self,
        policy: FieldPolicy,
        identifier: IdentifierValue,
        container_id: str,
        group_id: str,
    ) -> str | None:
        scope = policy.uniqueness_scope
        if scope is UniquenessScope.none:
            return None

        pair = identifier.pair
        label = f"{identifier.scheme_id}:{identifier.bare_value}"

        own = self._containers.get((group_id, container_id))
        if own and own[pair]:
            return f"The identifier {label} already exists in this container."

        if scope is UniquenessScope.per_group:
            for (gid, cid), counter in self._containers.items():
                if gid == group_id and cid != container_id and counter[pair]:
                    logger.debug("Duplicate %s found in container %s", label, cid)
                    return f"The identifier {label} already exists in another container."
        return None
