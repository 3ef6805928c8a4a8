"""Authentication endpoints: register, login, logout and the current user.

A successful login or registration sets a signed session cookie holding the
user id; ``/auth/current-user`` resolves it back to the account.
"""

from fastapi import APIRouter, Depends, HTTPException, Response, status

from intered.config import get_settings
from intered.application.schemas import LoginRequest, MessageResponse, UserCreate, UserResponse
from intered.application.services import AuthService
from intered.domain.entities import User
from intered.domain.exceptions import AuthenticationError, DuplicateEntityError
from intered.infrastructure.dependencies import (
    get_auth_service,
    get_current_user,
    get_session_signer,
)
from intered.infrastructure.security import SessionSigner

router = APIRouter(prefix="/auth", tags=["Auth"])


def _start_session(response: Response, signer: SessionSigner, user: User) -> None:
    settings = get_settings()
    response.set_cookie(
        key=settings.session_cookie_name,
        value=signer.sign(user.id),
        max_age=settings.session_max_age,
        httponly=True,
        samesite="lax",
        secure=settings.app_env == "production",
    )


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(
    data: UserCreate,
    response: Response,
    service: AuthService = Depends(get_auth_service),
    signer: SessionSigner = Depends(get_session_signer),
) -> UserResponse:
    try:
        user = await service.register(data)
    except DuplicateEntityError:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Username already exists")
    _start_session(response, signer, user)
    return UserResponse.model_validate(user)


@router.post("/login", response_model=UserResponse)
async def login(
    data: LoginRequest,
    response: Response,
    service: AuthService = Depends(get_auth_service),
    signer: SessionSigner = Depends(get_session_signer),
) -> UserResponse:
    try:
        user = await service.authenticate(data.username, data.password)
    except AuthenticationError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message)
    _start_session(response, signer, user)
    return UserResponse.model_validate(user)


@router.get("/logout", response_model=MessageResponse)
async def logout(response: Response) -> MessageResponse:
    response.delete_cookie(get_settings().session_cookie_name)
    return MessageResponse(message="Logged out successfully")


@router.get("/current-user", response_model=UserResponse)
async def current_user(user: User = Depends(get_current_user)) -> UserResponse:
    return UserResponse.model_validate(user)
