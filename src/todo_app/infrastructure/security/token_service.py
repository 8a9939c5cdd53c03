"""Opaque session token generation."""

from __future__ import annotations

from todo_app.application.ports.random_source_port import RandomSourcePort
from todo_app.application.ports.session_token_port import SessionTokenPort
from todo_app.domain.auth.credentials import SESSION_TOKEN_LENGTH, encode_bytes
from todo_app.infrastructure.security.random_source import SecretsRandomSource


class SessionTokenService(SessionTokenPort):
    """Issue base64-encoded 32-byte random session tokens unrelated to any credential."""

    def __init__(self, *, random_source: RandomSourcePort | None = None) -> None:
        self._random_source = random_source or SecretsRandomSource()

    def generate_session_token(self) -> str:
        return encode_bytes(self._random_source.token_bytes(SESSION_TOKEN_LENGTH))
