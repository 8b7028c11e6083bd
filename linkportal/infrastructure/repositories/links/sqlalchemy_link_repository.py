# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import UTC, datetime

from sqlalchemy.orm import Session

from linkportal.domain.links.entities import Link
from linkportal.domain.links.repositories import LinkRepository
from linkportal.infrastructure.db.models import LinkRecord, as_utc
from linkportal.infrastructure.unit_of_work import unit_of_work_scope

# Primary keys are signed 64-bit integers in every supported backend.
MAX_LINK_ID = 2**63 - 1


def _in_key_range(link_id: int) -> bool:
    return 0 < link_id <= MAX_LINK_ID


def _to_domain(row: LinkRecord) -> Link:
    return Link(
        id=row.id,
        owner_id=row.owner_id,
        url=row.url,
        title=row.title,
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
    )


class SqlAlchemyLinkRepository(LinkRepository):
    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def list_for_owner(self, owner_id: int) -> Sequence[Link]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = (
                session.query(LinkRecord)
                .filter(LinkRecord.owner_id == owner_id)
                .order_by(LinkRecord.id.asc())
                .all()
            )
            return [_to_domain(row) for row in rows]

    def add(self, owner_id: int, url: str, title: str | None) -> Link:
        now = datetime.now(UTC)
        with unit_of_work_scope(self._session_factory) as session:
            row = LinkRecord(
                owner_id=owner_id, url=url, title=title, created_at=now, updated_at=now
            )
            session.add(row)
            session.flush()
            return _to_domain(row)

    def update_owned(
        self, owner_id: int, link_id: int, url: str, title: str | None
    ) -> Link | None:
        if not _in_key_range(link_id):
            return None
        with unit_of_work_scope(self._session_factory) as session:
            row = (
                session.query(LinkRecord)
                .filter(LinkRecord.id == link_id, LinkRecord.owner_id == owner_id)
                .first()
            )
            if row is None:
                return None
            row.url = url
            row.title = title
            row.updated_at = datetime.now(UTC)
            session.flush()
            return _to_domain(row)

    def delete_owned(self, owner_id: int, link_id: int) -> bool:
        if not _in_key_range(link_id):
            return False
        with unit_of_work_scope(self._session_factory) as session:
            deleted = (
                session.query(LinkRecord)
                .filter(LinkRecord.id == link_id, LinkRecord.owner_id == owner_id)
                .delete()
            )
        return deleted > 0
