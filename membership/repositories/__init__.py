# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Repository package — re-exports the member store implementations."""
from membership.repositories.member_repository import (
    InMemoryMemberRepository,
    MemberRepository,
)
from membership.repositories.sql_member_repository import SqlMemberRepository

__all__ = ["MemberRepository", "InMemoryMemberRepository", "SqlMemberRepository"]
