# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Member data access.
Keyed member storage with identifier generation.
NO business rules here — duplicate names are the service's concern.
"""

from abc import ABC, abstractmethod
from typing import Optional

from membership.models.domain import Member


class MemberRepository(ABC):
    """Storage contract every member backend implements."""

    @abstractmethod
    def save(self, member: Member) -> Member:
        """Store ``member``, assigning the next id when it has none.

        A member that already carries an id replaces the stored record with
        that id, keeping its position. Raises KeyError if no such record exists.
        """

    @abstractmethod
    def find_by_id(self, member_id: int) -> Optional[Member]:
        ...

    @abstractmethod
    def find_by_name(self, name: str) -> Optional[Member]:
        """First member in insertion order whose name equals ``name``."""

    @abstractmethod
    def find_all(self) -> list[Member]:
        """All members in insertion order, as a new list."""

    @abstractmethod
    def count(self) -> int:
        ...

    @abstractmethod
    def clear(self) -> None:
        """Drop every member. Ids already handed out are never reused."""

    def verify_connection(self) -> None:
        """Raise if the backend cannot serve requests."""


class InMemoryMemberRepository(MemberRepository):
    """In-memory member storage."""

    def __init__(self) -> None:
        self._store: dict[int, Member] = {}
        self._sequence: int = 0

    # ── Write ──

    def save(self, member: Member) -> Member:
        if member.id is None:
            self._sequence += 1
            member = member.model_copy(update={"id": self._sequence})
        elif member.id not in self._store:
            raise KeyError(f"Member {member.id} not found")
        self._store[member.id] = member
        return member

    # ── Read ──

    def find_by_id(self, member_id: int) -> Optional[Member]:
        return self._store.get(member_id)

    def find_by_name(self, name: str) -> Optional[Member]:
        return next((m for m in self._store.values() if m.name == name), None)

    def find_all(self) -> list[Member]:
        return list(self._store.values())

    def count(self) -> int:
        return len(self._store)

    # ── Bulk / internal ──

    def clear(self) -> None:
        self._store.clear()
