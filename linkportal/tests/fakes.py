from __future__ import annotations

import itertools
from collections.abc import Sequence
from datetime import UTC, datetime, timedelta

from linkportal.domain.links.entities import Link
from linkportal.domain.links.repositories import LinkRepository
from linkportal.domain.users.entities import Session, User
from linkportal.domain.users.exceptions import DuplicateUsernameError
from linkportal.domain.users.repositories import PasswordHasher, SessionStore, UserRepository


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._seq = 1

    def find_by_username(self, username: str) -> User | None:
        return self._users.get(username)

    def find_by_id(self, user_id: int) -> User | None:
        return next((u for u in self._users.values() if u.id == user_id), None)

    def add(self, user: User) -> User:
        if user.username in self._users:
            raise DuplicateUsernameError()
        new_user = User(
            id=self._seq,
            username=user.username,
            password_hash=user.password_hash,
            created_at=user.created_at,
        )
        self._seq += 1
        self._users[new_user.username] = new_user
        return new_user


class InMemorySessionStore(SessionStore):
    def __init__(self) -> None:
        self.sessions: dict[str, Session] = {}
        self._counter = itertools.count(1)

    def create(self, user_id: int) -> Session:
        now = datetime.now(UTC)
        session = Session(
            token=f"token-{user_id}-{next(self._counter)}",
            user_id=user_id,
            created_at=now,
            expires_at=now + timedelta(days=7),
        )
        self.sessions[session.token] = session
        return session

    def resolve(self, token: str) -> int | None:
        session = self.sessions.get(token)
        if session is None or not session.is_active():
            return None
        return session.user_id

    def destroy(self, token: str) -> None:
        self.sessions.pop(token, None)

    def purge_expired(self) -> int:
        expired = [t for t, s in self.sessions.items() if not s.is_active()]
        for token in expired:
            del self.sessions[token]
        return len(expired)


class DeterministicHasher(PasswordHasher):
    def __init__(self) -> None:
        self.verified: list[str] = []

    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        self.verified.append(hashed)
        return hashed == f"hashed:{password}"


class InMemoryLinkRepository(LinkRepository):
    def __init__(self) -> None:
        self.rows: dict[int, Link] = {}
        self._seq = 1

    def list_for_owner(self, owner_id: int) -> Sequence[Link]:
        return [link for link in self.rows.values() if link.owner_id == owner_id]

    def add(self, owner_id: int, url: str, title: str | None) -> Link:
        now = datetime.now(UTC)
        link = Link(
            id=self._seq, owner_id=owner_id, url=url, title=title, created_at=now, updated_at=now
        )
        self._seq += 1
        self.rows[link.id] = link
        return link

    def update_owned(
        self, owner_id: int, link_id: int, url: str, title: str | None
    ) -> Link | None:
        link = self.rows.get(link_id)
        if link is None or link.owner_id != owner_id:
            return None
        updated = Link(
            id=link.id,
            owner_id=owner_id,
            url=url,
            title=title,
            created_at=link.created_at,
            updated_at=datetime.now(UTC),
        )
        self.rows[link_id] = updated
        return updated

    def delete_owned(self, owner_id: int, link_id: int) -> bool:
        link = self.rows.get(link_id)
        if link is None or link.owner_id != owner_id:
            return False
        del self.rows[link_id]
        return True
