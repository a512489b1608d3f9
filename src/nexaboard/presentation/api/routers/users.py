"""User directory router."""

from fastapi import APIRouter

from nexaboard.presentation.api.dependencies import CurrentUser, ListUsersQueryDep
from nexaboard.presentation.api.schemas.auth import UserResponse, to_user_response

router = APIRouter()


@router.get("", summary="List all users")
async def list_users(
    _: CurrentUser,
    query: ListUsersQueryDep,
) -> list[UserResponse]:
    users = await query.execute()
    return [to_user_response(user) for user in users]


@router.get("/managers", summary="List users who can lead a project")
async def list_managers(
    _: CurrentUser,
    query: ListUsersQueryDep,
) -> list[UserResponse]:
    """Managers and admins."""
    users = await query.execute(leaders_only=True)
    return [to_user_response(user) for user in users]
