from typing import Protocol


class TokenServiceProtocol(Protocol):
    def create_access_token(self, user_id: int) -> str: ...

    def verify_access_token(self, token: str) -> int | None: ...
