"""Port for password hashing and verification."""

from __future__ import annotations

from typing import Protocol


class PasswordHasherPort(Protocol):
    """Password hashing/verification contract."""

    def hash_password(self, password: str | bytes) -> str:
        """Hash plaintext password into storable credential text."""

    def verify_password(self, *, password: str | bytes, password_hash: str) -> bool:
        """Verify plaintext password against stored credential text."""
