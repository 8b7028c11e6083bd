# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from linkportal.domain.users.entities import User
from linkportal.domain.users.exceptions import DuplicateUsernameError
from linkportal.domain.users.repositories import PasswordHasher, SessionStore, UserRepository
from linkportal.shared.errors import ValidationError
from linkportal.shared.logging import logger


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        sessions: SessionStore,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._sessions = sessions
        self._password_hasher = password_hasher

    def execute(self, username: str, password: str) -> tuple[User, str]:
        if not username or not password:
            raise ValidationError()
        existing = self._users.find_by_username(username)
        if existing:
            logger.info("auth.register: duplicate username")
            raise DuplicateUsernameError()
        hashed = self._password_hasher.hash(password)
        user = User(id=0, username=username, password_hash=hashed, created_at=datetime.now(UTC))
        persisted = self._users.add(user)
        session = self._sessions.create(persisted.id)
        return persisted, session.token
