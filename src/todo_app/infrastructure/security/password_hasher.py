"""Password hasher adapters: salted SHA-256 credentials and bcrypt."""

from __future__ import annotations

import base64
import hashlib
import hmac
import logging

import bcrypt

from todo_app.application.ports.password_hasher_port import PasswordHasherPort
from todo_app.application.ports.random_source_port import RandomSourcePort
from todo_app.domain.auth.credentials import (
    SALT_LENGTH,
    Credential,
    MalformedCredentialError,
)
from todo_app.infrastructure.security.random_source import SecretsRandomSource

logger = logging.getLogger(__name__)

_HASH_ALGORITHM = "sha256"


class HashingUnavailableError(RuntimeError):
    """Raised when the hash primitive or secure randomness cannot be obtained."""


def _to_bytes(password: str | bytes) -> bytes:
    if isinstance(password, bytes):
        return password
    return password.encode("utf-8", "surrogatepass")


class Sha256PasswordHasher(PasswordHasherPort):
    """Salted SHA-256 hasher storing base64(salt || sha256(salt || password))."""

    def __init__(self, *, random_source: RandomSourcePort | None = None) -> None:
        self._random_source = random_source or SecretsRandomSource()

    def hash_password(self, password: str | bytes) -> str:
        salt = self._new_salt()
        digest = _salted_digest(salt=salt, password=_to_bytes(password))
        return Credential(salt=salt, digest=digest).encode()

    def verify_password(self, *, password: str | bytes, password_hash: str) -> bool:
        try:
            credential = Credential.decode(password_hash)
        except MalformedCredentialError as exc:
            logger.debug("credential_rejected reason=%s", exc)
            return False

        digest = _salted_digest(salt=credential.salt, password=_to_bytes(password))
        return hmac.compare_digest(digest, credential.digest)

    def _new_salt(self) -> bytes:
        try:
            salt = self._random_source.token_bytes(SALT_LENGTH)
        except NotImplementedError as exc:
            raise HashingUnavailableError("secure random source not available") from exc
        if len(salt) != SALT_LENGTH:
            raise HashingUnavailableError(
                f"random source returned {len(salt)} bytes, expected {SALT_LENGTH}"
            )
        return salt


def _salted_digest(*, salt: bytes, password: bytes) -> bytes:
    """Return sha256(salt || password)."""

    try:
        hasher = hashlib.new(_HASH_ALGORITHM)
    except ValueError as exc:
        raise HashingUnavailableError(f"{_HASH_ALGORITHM} algorithm not available") from exc
    hasher.update(salt)
    hasher.update(password)
    return hasher.digest()


class BcryptPasswordHasher(PasswordHasherPort):
    """Password hashing adapter using bcrypt."""

    def hash_password(self, password: str | bytes) -> str:
        return bcrypt.hashpw(_bcrypt_input(password), bcrypt.gensalt()).decode("utf-8")

    def verify_password(self, *, password: str | bytes, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(_bcrypt_input(password), password_hash.encode("utf-8"))
        except ValueError:
            return False


def _bcrypt_input(password: str | bytes) -> bytes:
    """Return base64(sha256(password)), 44 bytes and NUL-free, under bcrypt's 72-byte cap."""

    return base64.b64encode(_salted_digest(salt=b"", password=_to_bytes(password)))


def build_password_hasher(
    *,
    scheme: str,
    random_source: RandomSourcePort | None = None,
) -> PasswordHasherPort:
    """Return the hasher adapter configured for new credentials."""

    if scheme == "sha256":
        return Sha256PasswordHasher(random_source=random_source)
    if scheme == "bcrypt":
        return BcryptPasswordHasher()
    raise ValueError(f"unsupported password hash scheme: {scheme}")
