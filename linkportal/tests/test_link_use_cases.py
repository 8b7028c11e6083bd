from __future__ import annotations

import pytest

from linkportal.application.use_cases.links import (
    CreateLinkUseCase,
    DeleteLinkUseCase,
    ListLinksUseCase,
    UpdateLinkUseCase,
)
from linkportal.domain.links.exceptions import LinkNotFoundError
from linkportal.shared.errors import ValidationError
from linkportal.tests.fakes import InMemoryLinkRepository

ALICE = 1
BOB = 2


@pytest.fixture()
def links() -> InMemoryLinkRepository:
    return InMemoryLinkRepository()


def test_create_link_normalizes_url_and_sets_owner(links: InMemoryLinkRepository) -> None:
    link = CreateLinkUseCase(links=links).execute(ALICE, "example.com", "Example")

    assert link.url == "https://example.com"
    assert link.title == "Example"
    assert link.owner_id == ALICE


def test_create_link_without_title_uses_url_as_label(links: InMemoryLinkRepository) -> None:
    link = CreateLinkUseCase(links=links).execute(ALICE, "http://example.com", "")

    assert link.title is None
    assert link.label == "http://example.com"


def test_create_link_requires_url(links: InMemoryLinkRepository) -> None:
    with pytest.raises(ValidationError):
        CreateLinkUseCase(links=links).execute(ALICE, "", "Nothing")
    assert links.rows == {}


def test_list_links_only_returns_callers_links(links: InMemoryLinkRepository) -> None:
    create = CreateLinkUseCase(links=links)
    create.execute(ALICE, "a.example", None)
    create.execute(BOB, "b.example", None)
    create.execute(ALICE, "c.example", None)

    listed = ListLinksUseCase(links=links).execute(ALICE)

    assert [link.url for link in listed] == ["https://a.example", "https://c.example"]


def test_update_link_normalizes_url(links: InMemoryLinkRepository) -> None:
    link = CreateLinkUseCase(links=links).execute(ALICE, "example.com", "Example")

    updated = UpdateLinkUseCase(links=links).execute(ALICE, link.id, "example.org", "Org")

    assert updated.id == link.id
    assert updated.url == "https://example.org"
    assert updated.title == "Org"


def test_update_by_non_owner_is_not_found(links: InMemoryLinkRepository) -> None:
    link = CreateLinkUseCase(links=links).execute(ALICE, "example.com", "Example")

    with pytest.raises(LinkNotFoundError) as foreign:
        UpdateLinkUseCase(links=links).execute(BOB, link.id, "evil.example", "Mine")
    with pytest.raises(LinkNotFoundError) as missing:
        UpdateLinkUseCase(links=links).execute(BOB, 999, "evil.example", "Mine")

    assert foreign.value.to_dict() == missing.value.to_dict()
    assert links.rows[link.id].url == "https://example.com"


def test_delete_link(links: InMemoryLinkRepository) -> None:
    link = CreateLinkUseCase(links=links).execute(ALICE, "example.com", None)
    delete = DeleteLinkUseCase(links=links)

    with pytest.raises(LinkNotFoundError):
        delete.execute(BOB, link.id)
    assert link.id in links.rows

    delete.execute(ALICE, link.id)
    assert links.rows == {}

    with pytest.raises(LinkNotFoundError):
        delete.execute(ALICE, link.id)
