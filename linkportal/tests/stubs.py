from __future__ import annotations

from datetime import UTC, datetime
from typing import cast
from unittest.mock import MagicMock

from linkportal.application.use_cases.users.current_user import CurrentUserUseCase
from linkportal.domain.users.entities import User
from linkportal.infrastructure.auth import AuthGate

COOKIE_NAME = "auth_token"


def make_user(user_id: int = 1, username: str = "alice") -> User:
    return User(id=user_id, username=username, password_hash="hash", created_at=datetime.now(UTC))


class StubCurrentUser:
    def __init__(self, tokens: dict[str, User] | None = None) -> None:
        self.tokens = tokens or {}

    def execute(self, token: str | None) -> User | None:
        return self.tokens.get(token or "")


def make_gate(tokens: dict[str, User] | None = None) -> AuthGate:
    return AuthGate(
        current_user=cast(CurrentUserUseCase, StubCurrentUser(tokens)),
        cookie_name=COOKIE_NAME,
    )


def mock_use_case() -> MagicMock:
    return MagicMock(spec=["execute"])
