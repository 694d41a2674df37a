from fastapi import APIRouter
from pydantic import BaseModel, Field

from memberauth.core.modules.session.models import SessionUser
from memberauth.web.deps import AppDep, SessionIdDep
from memberauth.web.openapi import ErrorResponse

router = APIRouter(tags=["members"])


class CurrentSessionResponse(BaseModel):
    """Who is browsing: a user, or nobody."""

    user: SessionUser | None = Field(..., description="Session user, null when anonymous")


class MembersResponse(BaseModel):
    """Members-only content."""

    name: str = Field(..., description="Display name of the member")
    image: str = Field(..., description="Picture picked at random for this visit")


@router.get(
    "/session",
    summary="Get current session",
    description="Return the user of the current session, or null for anonymous visitors.",
    operation_id="getSession",
)
async def get_session(app: AppDep, session_id: SessionIdDep) -> CurrentSessionResponse:
    return CurrentSessionResponse(user=await app.get_session_user(session_id))


@router.get(
    "/members",
    summary="Members area",
    description="Content visible only with a live session.",
    operation_id="getMembers",
    responses={
        200: {"description": "Members content"},
        401: {"model": ErrorResponse, "description": "Not logged in"},
    },
)
async def get_members(app: AppDep, session_id: SessionIdDep) -> MembersResponse:
    user, image = await app.get_member_image(session_id)
    return MembersResponse(name=user.name, image=image)
