# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Member registration and lookup endpoints.
Thin HTTP layer — delegates ALL logic to MemberService.
"""

from fastapi import APIRouter, Depends, HTTPException

from membership.core.dependencies import get_member_service
from membership.core.errors import DuplicateNameError
from membership.models.domain import Member
from membership.schemas.member import MemberCreateRequest, MemberResponse
from membership.services.member_service import MemberService

router = APIRouter(prefix="/api/v1", tags=["Members"])


@router.post("/members", status_code=201, response_model=MemberResponse)
def register_member(
    payload: MemberCreateRequest,
    service: MemberService = Depends(get_member_service),
):
    """Register a new member. Names must be unique."""
    try:
        member_id = service.register(Member(name=payload.name))
    except DuplicateNameError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return MemberResponse(id=member_id, name=payload.name)


@router.get("/members", response_model=list[MemberResponse])
def list_members(
    service: MemberService = Depends(get_member_service),
):
    """List all members in registration order."""
    return [MemberResponse(id=m.id, name=m.name) for m in service.list_members()]


@router.get("/members/{member_id}", response_model=MemberResponse)
def get_member(
    member_id: int,
    service: MemberService = Depends(get_member_service),
):
    """Get a single member by id."""
    member = service.find_one(member_id)
    if member is None:
        raise HTTPException(status_code=404, detail=f"Member {member_id} not found")
    return MemberResponse(id=member.id, name=member.name)
