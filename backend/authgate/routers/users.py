"""
Protected user endpoints.
"""
from fastapi import APIRouter

from authgate.dependencies.auth import AuthServiceDep, CurrentIdentity
from authgate.schemas.auth import ErrorResponse
from authgate.schemas.user import ProfileResponse, UserListResponse, UserProfile

router = APIRouter(prefix="/api", tags=["Users"])

GATED_RESPONSES = {401: {"model": ErrorResponse}, 403: {"model": ErrorResponse}}


@router.get(
    "/profile",
    response_model=ProfileResponse,
    summary="Get current user profile",
    responses={**GATED_RESPONSES, 404: {"model": ErrorResponse}},
)
async def get_profile(identity: CurrentIdentity, auth_service: AuthServiceDep):
    """
    Get the stored profile of the authenticated user.

    Returns 404 if the account no longer exists even though the token is valid.
    """
    user = await auth_service.get_profile(identity)
    return ProfileResponse(user=UserProfile.model_validate(user.model_dump()))


@router.get(
    "/users",
    response_model=UserListResponse,
    summary="List all users",
    responses=GATED_RESPONSES,
)
async def list_users(identity: CurrentIdentity, auth_service: AuthServiceDep):
    """List every registered user (no credentials)."""
    users = await auth_service.list_users()
    return UserListResponse(
        users=[UserProfile.model_validate(user.model_dump()) for user in users]
    )
