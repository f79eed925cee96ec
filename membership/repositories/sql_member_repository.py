# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Data-access layer for members backed by a relational database."""
from typing import Optional

from sqlalchemy import text
from sqlalchemy.engine import Engine

from membership.core.logging import get_logger
from membership.models.domain import Member
from membership.repositories.member_repository import MemberRepository

logger = get_logger(__name__)

_CREATE_TABLE = {
    "sqlite": """
        CREATE TABLE IF NOT EXISTS members (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name VARCHAR(255) NOT NULL
        )
    """,
    "postgresql": """
        CREATE TABLE IF NOT EXISTS members (
            id BIGSERIAL PRIMARY KEY,
            name VARCHAR(255) NOT NULL
        )
    """,
}


def _row_to_member(row) -> Member:
    return Member(id=int(row[0]), name=row[1])


class SqlMemberRepository(MemberRepository):
    def __init__(self, engine: Engine):
        self._engine = engine

    # ── Schema ─────────────────────────────────────────────────────────

    def ensure_schema(self) -> None:
        dialect = self._engine.dialect.name
        ddl = _CREATE_TABLE.get(dialect)
        if ddl is None:
            raise RuntimeError(f"Unsupported database dialect '{dialect}'")
        with self._engine.begin() as conn:
            conn.execute(text(ddl))
        logger.info("Member table ready (dialect=%s)", dialect)

    def verify_connection(self) -> None:
        with self._engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    # ── Write ──────────────────────────────────────────────────────────

    def save(self, member: Member) -> Member:
        with self._engine.begin() as conn:
            if member.id is None:
                new_id = conn.execute(
                    text("INSERT INTO members (name) VALUES (:name) RETURNING id"),
                    {"name": member.name},
                ).scalar_one()
                return member.model_copy(update={"id": int(new_id)})

            updated = conn.execute(
                text("UPDATE members SET name = :name WHERE id = :id"),
                {"id": member.id, "name": member.name},
            )
            if updated.rowcount == 0:
                raise KeyError(f"Member {member.id} not found")
        return member

    def clear(self) -> None:
        with self._engine.begin() as conn:
            conn.execute(text("DELETE FROM members"))

    # ── Read ───────────────────────────────────────────────────────────

    def find_by_id(self, member_id: int) -> Optional[Member]:
        with self._engine.connect() as conn:
            row = conn.execute(
                text("SELECT id, name FROM members WHERE id = :id"),
                {"id": member_id},
            ).fetchone()
        return _row_to_member(row) if row else None

    def find_by_name(self, name: str) -> Optional[Member]:
        with self._engine.connect() as conn:
            row = conn.execute(
                text("SELECT id, name FROM members WHERE name = :name ORDER BY id LIMIT 1"),
                {"name": name},
            ).fetchone()
        return _row_to_member(row) if row else None

    def find_all(self) -> list[Member]:
        with self._engine.connect() as conn:
            rows = conn.execute(
                text("SELECT id, name FROM members ORDER BY id")
            ).fetchall()
        return [_row_to_member(r) for r in rows]

    def count(self) -> int:
        with self._engine.connect() as conn:
            return conn.execute(text("SELECT COUNT(*) FROM members")).scalar_one()
