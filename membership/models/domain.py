# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain models — pure data structures, NO FastAPI dependency.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class Member(BaseModel):
    """A registered member. ``id`` is None until the store assigns one."""

    model_config = ConfigDict(frozen=True)

    id: Optional[int] = None
    name: str
