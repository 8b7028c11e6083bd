# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from linkportal.domain.users.entities import User
from linkportal.domain.users.exceptions import InvalidCredentialsError
from linkportal.domain.users.repositories import PasswordHasher, SessionStore, UserRepository
from linkportal.shared.errors import ValidationError
from linkportal.shared.logging import logger


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        sessions: SessionStore,
        password_hasher: PasswordHasher,
        dummy_hash: str,
    ) -> None:
        self._users = users
        self._sessions = sessions
        self._password_hasher = password_hasher
        self._dummy_hash = dummy_hash

    def execute(self, username: str, password: str) -> tuple[User, str]:
        if not username or not password:
            raise ValidationError()

        user = self._users.find_by_username(username)
        hashed = user.password_hash if user else self._dummy_hash
        password_valid = self._password_hasher.verify(password, hashed)

        if user is None or not password_valid:
            logger.info("auth.login: rejected")
            raise InvalidCredentialsError()

        session = self._sessions.create(user.id)
        return user, session.token
