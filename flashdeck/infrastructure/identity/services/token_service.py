"""HS256 access tokens carrying the user id in ``sub``."""

from datetime import UTC, datetime, timedelta

import jwt

from flashdeck.config import get_settings

ALGORITHM = "HS256"
TOKEN_TYPE = "access"


class TokenService:
    def __init__(self, secret_key: str | None = None, lifetime: timedelta | None = None) -> None:
        settings = get_settings()
        self.secret_key = secret_key or settings.SECRET_KEY
        self.lifetime = lifetime or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    def create_access_token(self, user_id: int, expires_delta: timedelta | None = None) -> str:
        claims = {
            "sub": str(user_id),
            "type": TOKEN_TYPE,
            "exp": datetime.now(UTC) + (expires_delta or self.lifetime),
        }
        return jwt.encode(claims, self.secret_key, algorithm=ALGORITHM)

    def verify_access_token(self, token: str) -> int | None:
        """User id from a valid, unexpired access token; None for anything else."""
        try:
            claims = jwt.decode(token, self.secret_key, algorithms=[ALGORITHM])
        except jwt.InvalidTokenError:
            return None
        if claims.get("type") != TOKEN_TYPE:
            return None
        try:
            return int(claims["sub"])
        except (KeyError, TypeError, ValueError):
            return None

