"""Credential value object and normalization helpers for account inputs."""

from __future__ import annotations

import base64
from dataclasses import dataclass

SALT_LENGTH = 16
DIGEST_LENGTH = 32
CREDENTIAL_LENGTH = SALT_LENGTH + DIGEST_LENGTH
SESSION_TOKEN_LENGTH = 32


class MalformedCredentialError(ValueError):
    """Raised when stored credential text cannot be decoded into salt and digest."""


def encode_bytes(raw: bytes) -> str:
    """Encode raw bytes as single-line standard base64 text."""

    return base64.b64encode(raw).decode("ascii")


def decode_bytes(text: str) -> bytes:
    """Decode standard base64 text, rejecting characters outside the alphabet."""

    try:
        return base64.b64decode(text, validate=True)
    except ValueError as exc:
        raise MalformedCredentialError("credential is not valid base64") from exc


@dataclass(frozen=True)
class Credential:
    """Fixed-width salted digest stored in place of a plaintext password."""

    salt: bytes
    digest: bytes

    def __post_init__(self) -> None:
        if len(self.salt) != SALT_LENGTH:
            raise MalformedCredentialError(f"salt must be {SALT_LENGTH} bytes")
        if len(self.digest) != DIGEST_LENGTH:
            raise MalformedCredentialError(f"digest must be {DIGEST_LENGTH} bytes")

    def encode(self) -> str:
        """Return the storable text form of `salt || digest`."""

        return encode_bytes(self.salt + self.digest)

    @classmethod
    def decode(cls, text: str) -> Credential:
        """Parse stored credential text back into its salt and digest fields."""

        raw = decode_bytes(text)
        if len(raw) != CREDENTIAL_LENGTH:
            raise MalformedCredentialError(
                f"credential must decode to {CREDENTIAL_LENGTH} bytes, got {len(raw)}"
            )
        return cls(salt=raw[:SALT_LENGTH], digest=raw[SALT_LENGTH:])


def normalize_username(*, username: str) -> str:
    """Normalize one username and reject blank values."""

    normalized = username.strip()
    if not normalized:
        raise ValueError("username cannot be blank")
    return normalized


def require_user_password(*, password: str) -> str:
    """Reject blank plaintext passwords; the value itself is kept as typed."""

    if not password.strip():
        raise ValueError("password cannot be blank")
    return password
