"""
Auth API
"""

from fastapi import APIRouter, Depends, status

from ...core.auth import UserContext, get_user_context
from ...core.exceptions import ErrorResponse
from ...domain.models.user import User
from .dependencies import get_auth_service
from .schemas import AuthResponse, UserLoginRequest, UserRegisterRequest, UserResponse
from .service import AuthService

router = APIRouter(prefix="/auth", tags=["Authentication"])


def _auth_response(user: User, access_token: str) -> AuthResponse:
    return AuthResponse(access_token=access_token, user=UserResponse.model_validate(user))


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse, "description": "이미 가입된 이메일"}},
)
async def register(
    body: UserRegisterRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """가입 직후 바로 사용할 수 있는 Access Token을 함께 돌려준다."""
    return _auth_response(*await auth_service.register(body.email, body.password))


@router.post(
    "/login",
    response_model=AuthResponse,
    responses={401: {"model": ErrorResponse, "description": "이메일 또는 비밀번호 불일치"}},
)
async def login(
    body: UserLoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    return _auth_response(*await auth_service.login(body.email, body.password))


@router.get("/me", response_model=UserResponse)
async def get_me(
    ctx: UserContext = Depends(get_user_context),
    auth_service: AuthService = Depends(get_auth_service),
):
    return await auth_service.get_me(ctx)
