"""Unit tests for password hashing."""

from flashdeck.infrastructure.identity.services import PasswordService


def test_hash_and_verify() -> None:
    service = PasswordService(pepper="")
    hashed = service.hash_password("s3cret")

    assert hashed != "s3cret"
    assert service.verify_password("s3cret", hashed)
    assert not service.verify_password("wrong", hashed)


def test_pepper_must_match() -> None:
    hashed = PasswordService(pepper="pepper-a").hash_password("s3cret")

    assert PasswordService(pepper="pepper-a").verify_password("s3cret", hashed)
    assert not PasswordService(pepper="pepper-b").verify_password("s3cret", hashed)


def test_unknown_hash_format_is_a_mismatch() -> None:
    assert not PasswordService(pepper="").verify_password("s3cret", "plaintext")


def test_dummy_hash_is_stable_and_verifiable() -> None:
    service = PasswordService(pepper="")

    assert service.get_dummy_hash() == service.get_dummy_hash()
    assert not service.verify_password("anything", service.get_dummy_hash())
