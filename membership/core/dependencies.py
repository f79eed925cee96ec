# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
FastAPI dependency injection — wire the member store and service.
"""

from membership.core.config import settings
from membership.core.database import build_engine
from membership.repositories.member_repository import (
    InMemoryMemberRepository,
    MemberRepository,
)
from membership.repositories.sql_member_repository import SqlMemberRepository
from membership.services.member_service import MemberService


def build_member_repo(backend: str | None = None) -> MemberRepository:
    """Construct the store selected by STORAGE_BACKEND."""
    backend = backend or settings.STORAGE_BACKEND
    if backend == "memory":
        return InMemoryMemberRepository()
    if backend == "sql":
        return SqlMemberRepository(build_engine())
    raise ValueError(f"Unknown STORAGE_BACKEND '{backend}' (expected 'memory' or 'sql')")


# ── Singleton instances (with injected dependencies) ──
_member_repo = build_member_repo()
_member_service = MemberService(member_repo=_member_repo)


# ── FastAPI dependency functions ──
def get_member_repo() -> MemberRepository:
    return _member_repo


def get_member_service() -> MemberService:
    return _member_service
