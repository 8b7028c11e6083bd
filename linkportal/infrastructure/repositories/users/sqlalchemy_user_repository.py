# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from linkportal.domain.users.entities import Session as DomainSession
from linkportal.domain.users.entities import User as DomainUser
from linkportal.domain.users.exceptions import DuplicateUsernameError
from linkportal.domain.users.repositories import SessionStore, UserRepository
from linkportal.infrastructure.db.models import SessionRecord, UserRecord, as_utc
from linkportal.infrastructure.unit_of_work import unit_of_work_scope
from linkportal.shared.logging import logger

TOKEN_BYTES = 48


def _to_domain(row: UserRecord) -> DomainUser:
    return DomainUser(
        id=row.id,
        username=row.username,
        password_hash=row.password_hash,
        created_at=as_utc(row.created_at),
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def find_by_username(self, username: str) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.query(UserRecord).filter(UserRecord.username == username).first()
            return _to_domain(row) if row else None

    def find_by_id(self, user_id: int) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(UserRecord, user_id)
            return _to_domain(row) if row else None

    def add(self, user: DomainUser) -> DomainUser:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = UserRecord(
                    username=user.username,
                    password_hash=user.password_hash,
                    created_at=user.created_at,
                )
                session.add(row)
                session.flush()
                return _to_domain(row)
        except IntegrityError as exc:
            logger.info("users.add: unique constraint rejected username")
            raise DuplicateUsernameError() from exc


class SqlAlchemySessionStore(SessionStore):
    """Session store persisted in the ``sessions`` table.

    Rows outlive the process; ``expires_at`` acts as the store TTL and expired
    rows never resolve. Each call runs in its own transaction, so concurrent
    logins for one user simply produce independent rows.
    """

    def __init__(
        self,
        session_factory: Callable[[], Session],
        *,
        lifetime: timedelta = timedelta(days=7),
    ) -> None:
        self._session_factory = session_factory
        self._lifetime = lifetime

    def create(self, user_id: int) -> DomainSession:
        now = datetime.now(UTC)
        token_value = secrets.token_urlsafe(TOKEN_BYTES)
        expires_at = now + self._lifetime
        with unit_of_work_scope(self._session_factory) as session:
            session.add(
                SessionRecord(
                    user_id=user_id,
                    token=token_value,
                    created_at=now,
                    expires_at=expires_at,
                )
            )
        logger.info(f"sessions.create: ok user_id={user_id} exp={expires_at.isoformat()}")
        return DomainSession(
            token=token_value, user_id=user_id, created_at=now, expires_at=expires_at
        )

    def resolve(self, token: str) -> int | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = (
                session.query(SessionRecord.user_id)
                .filter(
                    SessionRecord.token == token,
                    SessionRecord.expires_at > datetime.now(UTC),
                )
                .first()
            )
            return row.user_id if row else None

    def destroy(self, token: str) -> None:
        with unit_of_work_scope(self._session_factory) as session:
            deleted = session.query(SessionRecord).filter(SessionRecord.token == token).delete()
        logger.info(f"sessions.destroy: removed={deleted}")

    def purge_expired(self) -> int:
        with unit_of_work_scope(self._session_factory) as session:
            deleted = (
                session.query(SessionRecord)
                .filter(SessionRecord.expires_at <= datetime.now(UTC))
                .delete()
            )
        if deleted:
            logger.info(f"sessions.purge: removed={deleted}")
        return deleted
