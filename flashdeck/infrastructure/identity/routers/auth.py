import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response
from slowapi import Limiter
from slowapi.util import get_remote_address

from flashdeck.application.identity.use_cases.authentication_use_case import (
    AuthenticationUseCase,
)
from flashdeck.config import get_settings
from flashdeck.constants import AUTH_COOKIE_NAME
from flashdeck.core import container
from flashdeck.domain.identity.exceptions import InvalidCredentialsError
from flashdeck.exceptions import AuthError, ValidationError
from flashdeck.infrastructure.common.di import inject_use_case
from flashdeck.infrastructure.common.schemas import SuccessResponse
from flashdeck.infrastructure.identity.dependencies import CurrentUser
from flashdeck.infrastructure.identity.schemas import LoginRequest, MeResponse, UserDetails

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/auth", tags=["auth"])
settings = get_settings()
limiter = Limiter(key_func=get_remote_address, enabled=settings.RATE_LIMIT_ENABLED)


def set_auth_cookie(response: Response, token: str) -> None:
    """Set the access token as an httpOnly cookie."""
    response.set_cookie(
        key=AUTH_COOKIE_NAME,
        value=token,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="strict",
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
    )


def clear_auth_cookie(response: Response) -> None:
    """Clear the access token cookie."""
    response.delete_cookie(
        key=AUTH_COOKIE_NAME,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="strict",
    )


@router.post("/login", response_model=SuccessResponse)
@limiter.limit("5/minute")  # type: ignore[misc]
async def login(
    request: Request,
    response: Response,
    body: LoginRequest,
    use_case: Annotated[
        AuthenticationUseCase, Depends(inject_use_case(container.authentication_use_case))
    ],
) -> SuccessResponse:
    """
    Log in with email and password.

    On success the credential is set as an httpOnly cookie. Unknown email and
    wrong password produce the same error.
    """
    if not body.email or not body.password:
        raise ValidationError("Email and password are required")

    try:
        _, token = use_case.authenticate_user(body.email, body.password)
    except InvalidCredentialsError:
        raise AuthError("Invalid email or password") from None

    set_auth_cookie(response, token)
    return SuccessResponse(success=True, message="Login successful")


@router.post("/logout", response_model=SuccessResponse)
async def logout(response: Response) -> SuccessResponse:
    """
    Log out by clearing the credential cookie.

    The token itself stays valid until it expires.
    """
    clear_auth_cookie(response)
    return SuccessResponse(success=True, message="Logout successful")


@router.get("/me", response_model=MeResponse)
async def me(current_user: CurrentUser) -> MeResponse:
    """Return the authenticated user's id, email and creation time."""
    return MeResponse(user=UserDetails.from_entity(current_user))
