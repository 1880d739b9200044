"""
Authentication router for registration, login and logout.
"""
from fastapi import APIRouter, status

from authgate.dependencies.auth import AuthServiceDep, CurrentIdentity
from authgate.schemas.auth import (
    ErrorResponse,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
    RegisterResponse,
)

router = APIRouter(prefix="/api", tags=["Authentication"])


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def register(body: RegisterRequest, auth_service: AuthServiceDep):
    """
    Register a new user account.

    - **username**: Unique username
    - **email**: Unique email address
    - **password**: Password (minimum 6 characters)
    """
    user = await auth_service.register(body.username, body.email, body.password)
    return RegisterResponse(user=user)


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Login and get access token",
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def login(body: LoginRequest, auth_service: AuthServiceDep):
    """
    Authenticate with email and password to receive a JWT token.

    Send the token on protected endpoints as `Authorization: Bearer <token>`.
    It expires 24 hours after issuance.
    """
    token, user = await auth_service.login(body.email, body.password)
    return LoginResponse(token=token, user=user)


@router.post(
    "/logout",
    response_model=MessageResponse,
    summary="Logout",
    responses={401: {"model": ErrorResponse}, 403: {"model": ErrorResponse}},
)
async def logout(identity: CurrentIdentity):
    """
    Acknowledge a logout.

    Tokens are not tracked server-side; the client discards its token and it
    stays valid until it expires.
    """
    return MessageResponse(message="Logout successful")
