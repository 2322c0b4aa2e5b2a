"""FastAPI dependencies for identity and authentication."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import APIKeyCookie, HTTPAuthorizationCredentials, HTTPBearer

from flashdeck.application.identity.use_cases.authentication_use_case import (
    AuthenticationUseCase,
)
from flashdeck.constants import AUTH_COOKIE_NAME
from flashdeck.core import container
from flashdeck.domain.identity.entities.user import User
from flashdeck.domain.identity.exceptions import InvalidCredentialsError
from flashdeck.exceptions import AuthError
from flashdeck.infrastructure.common.di import inject_use_case

cookie_scheme = APIKeyCookie(name=AUTH_COOKIE_NAME, auto_error=False)
bearer_scheme = HTTPBearer(auto_error=False)


def get_token(
    cookie_token: Annotated[str | None, Depends(cookie_scheme)],
    bearer: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> str | None:
    """Credential from the auth cookie, falling back to an Authorization header."""
    if cookie_token:
        return cookie_token
    if bearer:
        return bearer.credentials
    return None


async def get_current_user(
    token: Annotated[str | None, Depends(get_token)],
    use_case: Annotated[
        AuthenticationUseCase, Depends(inject_use_case(container.authentication_use_case))
    ],
) -> User:
    """
    Get the current authenticated user from the credential.

    Used as a gate on write endpoints only; reads never depend on it.

    Raises:
        AuthError: If no credential is presented, or it is invalid or expired
    """
    if not token:
        raise AuthError("Unauthorized - No token provided")

    try:
        return use_case.authenticate_token(token)
    except InvalidCredentialsError:
        raise AuthError("Unauthorized - Invalid token") from None


CurrentUser = Annotated[User, Depends(get_current_user)]
