"""Application account service for registration, login and password change."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from uuid import UUID

from todo_app.application.dto.todo_models import UserModel
from todo_app.application.ports.password_hasher_port import PasswordHasherPort
from todo_app.application.ports.session_token_port import SessionTokenPort
from todo_app.application.ports.user_repository_port import UserRepositoryPort
from todo_app.domain.auth.credentials import normalize_username, require_user_password

logger = logging.getLogger(__name__)


class AuthOutcome(StrEnum):
    """Supported authentication outcomes."""

    SUCCESS = "success"
    INVALID_CREDENTIALS = "invalid_credentials"


@dataclass(frozen=True)
class AuthResult:
    """Authentication result model."""

    outcome: AuthOutcome
    user: UserModel | None = None
    session_token: str | None = None


class InvalidCredentialsError(PermissionError):
    """Raised when a password-protected action is given the wrong password."""

    def __init__(self) -> None:
        super().__init__("invalid credentials")


class AuthService:
    """Create accounts, authenticate credentials and issue session tokens."""

    def __init__(
        self,
        *,
        users: UserRepositoryPort,
        password_hasher: PasswordHasherPort,
        session_tokens: SessionTokenPort,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher
        self._session_tokens = session_tokens

    def register_user(self, *, username: str, password: str) -> UserModel:
        """Persist a new user whose password is stored only as a credential."""

        user = UserModel(
            username=normalize_username(username=username),
            password=self._password_hasher.hash_password(
                require_user_password(password=password)
            ),
        )
        self._users.save(user_id=user.id, users=[user])
        logger.info("user_registered user_id=%s", user.id)
        return user

    def authenticate(self, *, user_id: UUID, password: str) -> AuthResult:
        """Verify one user's password and issue a session token on success."""

        user = self._verified_user(user_id=user_id, password=password)
        if user is None:
            logger.info("login_failed user_id=%s", user_id)
            return AuthResult(outcome=AuthOutcome.INVALID_CREDENTIALS)

        logger.info("login_success user_id=%s", user_id)
        return AuthResult(
            outcome=AuthOutcome.SUCCESS,
            user=user,
            session_token=self._session_tokens.generate_session_token(),
        )

    def change_password(
        self,
        *,
        user_id: UUID,
        current_password: str,
        new_password: str,
    ) -> UserModel:
        """Replace a user's credential after confirming the current password."""

        user = self._verified_user(user_id=user_id, password=current_password)
        if user is None:
            logger.info("password_change_rejected user_id=%s", user_id)
            raise InvalidCredentialsError()

        user.password = self._password_hasher.hash_password(
            require_user_password(password=new_password)
        )
        self._users.save(user_id=user.id, users=[user])
        logger.info("password_changed user_id=%s", user.id)
        return user

    def _verified_user(self, *, user_id: UUID, password: str) -> UserModel | None:
        """Return the stored user only when the password matches its credential."""

        user = self._users.get_by_id(user_id=user_id)
        if user is None or user.password is None:
            return None
        if not self._password_hasher.verify_password(
            password=password,
            password_hash=user.password,
        ):
            return None
        return user
