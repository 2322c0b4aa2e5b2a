"""Peppered password hashing."""

from pwdlib import PasswordHash
from pwdlib.exceptions import UnknownHashError

from flashdeck.config import get_settings


class PasswordService:
    """
    Hash and verify passwords with the recommended pwdlib scheme.

    A server-side pepper is appended before hashing, so a leaked database
    alone is not enough to brute-force passwords.
    """

    def __init__(self, pepper: str | None = None) -> None:
        self.pepper = get_settings().PASSWORD_PEPPER if pepper is None else pepper
        self._hasher = PasswordHash.recommended()
        # Verified against when the email is unknown, so both failures cost the same
        self._dummy_hash = self._hasher.hash("flashdeck-timing-equalizer")

    def hash_password(self, plain_password: str) -> str:
        return self._hasher.hash(plain_password + self.pepper)

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        try:
            return self._hasher.verify(plain_password + self.pepper, hashed_password)
        except UnknownHashError:
            return False

    def get_dummy_hash(self) -> str:
        return self._dummy_hash
