# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Request / Response schemas — API contract definitions.
These are Pydantic models used ONLY at the controller (HTTP) boundary.
"""

from pydantic import BaseModel, Field, field_validator


class MemberCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, description="Member name")

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v


class MemberResponse(BaseModel):
    id: int
    name: str


class ErrorResponse(BaseModel):
    error: str
    detail: str
    request_id: str | None = None
