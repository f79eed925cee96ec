# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Membership — business rules above the member store.
The only rule is name uniqueness; queries pass straight through.
"""

import threading
from typing import Optional

from membership.core.errors import DuplicateNameError
from membership.core.logging import get_logger
from membership.metrics.prometheus import (
    DUPLICATE_REJECTIONS,
    MEMBERS_REGISTERED,
    MEMBERS_TOTAL,
)
from membership.models.domain import Member
from membership.repositories.member_repository import MemberRepository

logger = get_logger(__name__)


class MemberService:
    """Registration and lookup of members."""

    def __init__(self, member_repo: MemberRepository) -> None:
        self._members = member_repo
        # check + save must not interleave between threads
        self._register_lock = threading.Lock()

    # ── Commands ──

    def register(self, member: Member) -> int:
        """Store a new member and return its id. Raises DuplicateNameError.

        Any id already set on ``member`` is ignored; the store always assigns a
        fresh one.
        """
        with self._register_lock:
            self._validate_duplicate_member(member)
            saved = self._members.save(member.model_copy(update={"id": None}))

        MEMBERS_REGISTERED.inc()
        MEMBERS_TOTAL.set(self._members.count())
        logger.info(
            "Member registered: id=%d, name=%s", saved.id, saved.name,
            extra={"member_id": saved.id, "member_name": saved.name},
        )
        return saved.id

    def _validate_duplicate_member(self, member: Member) -> None:
        if self._members.find_by_name(member.name) is not None:
            DUPLICATE_REJECTIONS.inc()
            logger.info(
                "Duplicate registration rejected: name=%s", member.name,
                extra={"member_name": member.name},
            )
            raise DuplicateNameError(member.name)

    # ── Queries ──

    def list_members(self) -> list[Member]:
        return self._members.find_all()

    def find_one(self, member_id: int) -> Optional[Member]:
        return self._members.find_by_id(member_id)
