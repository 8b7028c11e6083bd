from __future__ import annotations

from datetime import UTC, datetime

import pytest

from linkportal.domain.links.entities import Link, normalize_url


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("example.com", "https://example.com"),
        ("https://example.com", "https://example.com"),
        ("http://example.com/path?q=1", "http://example.com/path?q=1"),
        ("www.example.com/a b", "https://www.example.com/a b"),
        ("ftp://files.example", "https://ftp://files.example"),
    ],
)
def test_normalize_url(raw: str, expected: str) -> None:
    assert normalize_url(raw) == expected


def test_normalize_url_is_idempotent() -> None:
    once = normalize_url("example.com")
    assert normalize_url(once) == once


def test_link_label_prefers_title() -> None:
    now = datetime.now(UTC)
    titled = Link(
        id=1, owner_id=1, url="https://x.example", title="X", created_at=now, updated_at=now
    )
    untitled = Link(
        id=2, owner_id=1, url="https://y.example", title=None, created_at=now, updated_at=now
    )

    assert titled.label == "X"
    assert untitled.label == "https://y.example"
