"""Use-case resolving a session token to its user."""

from __future__ import annotations

from linkportal.domain.users.entities import User
from linkportal.domain.users.repositories import SessionStore, UserRepository


class CurrentUserUseCase:
    def __init__(self, *, users: UserRepository, sessions: SessionStore) -> None:
        self._users = users
        self._sessions = sessions

    def execute(self, token: str | None) -> User | None:
        if not token:
            return None
        user_id = self._sessions.resolve(token)
        if user_id is None:
            return None
        return self._users.find_by_id(user_id)
