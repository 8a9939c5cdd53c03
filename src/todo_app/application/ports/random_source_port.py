"""Port for the cryptographically secure randomness capability."""

from __future__ import annotations

from typing import Protocol


class RandomSourcePort(Protocol):
    """Source of unpredictable bytes for salts and session tokens."""

    def token_bytes(self, length: int) -> bytes:
        """Return exactly `length` random bytes."""
