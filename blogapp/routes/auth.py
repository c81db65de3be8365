"""Authentication routes: login and current user profile."""

from fastapi import APIRouter, Request
from fastapi.responses import ORJSONResponse
from starlette.responses import Response

from blogapp.decorators import timed
from blogapp.dependencies import AuthServiceDep, UserDBDep
from blogapp.managers import limiter
from blogapp.routes.responses import AUTH_LIMIT, BAD_REQUEST, RATE_LIMITED, READ_LIMIT, UNAUTHORIZED
from blogapp.schemas import LoginInput, MeView, Token
from blogapp.services import UserService

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post(
    "/login",
    response_class=ORJSONResponse,
    response_model=Token,
    summary="Log in",
    description="Exchange login (or email) and password for a bearer access token.",
    responses={
        **BAD_REQUEST,
        401: {
            "description": "Invalid credentials or banned user",
            "content": {"application/json": {"example": {"detail": "Invalid login or password"}}},
        },
        **RATE_LIMITED,
    },
    operation_id="auth_login",
)
@timed("/auth/login")
@limiter.limit(AUTH_LIMIT)
async def login(
    request: Request,
    response: Response,
    credentials: LoginInput,
    service: AuthServiceDep,
) -> Token:
    return await service.login(
        credentials.login_or_email,
        credentials.password.get_secret_value(),
    )


@router.get(
    "/me",
    response_class=ORJSONResponse,
    response_model=MeView,
    summary="Current user",
    responses={**UNAUTHORIZED, **RATE_LIMITED},
    operation_id="auth_me",
)
@timed("/auth/me")
@limiter.limit(READ_LIMIT)
async def me(request: Request, response: Response, current_user: UserDBDep) -> MeView:
    return UserService.get_me(current_user)
