"""Secure randomness adapter backed by the OS entropy pool."""

from __future__ import annotations

import secrets

from todo_app.application.ports.random_source_port import RandomSourcePort


class SecretsRandomSource(RandomSourcePort):
    """Random source using `secrets`, safe to share across threads."""

    def token_bytes(self, length: int) -> bytes:
        if length <= 0:
            raise ValueError("length must be positive")
        return secrets.token_bytes(length)
