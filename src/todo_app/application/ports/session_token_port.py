"""Port for opaque session token generation."""

from __future__ import annotations

from typing import Protocol


class SessionTokenPort(Protocol):
    """Session token issuing contract."""

    def generate_session_token(self) -> str:
        """Return a fresh, text-encoded, unpredictable session token."""
