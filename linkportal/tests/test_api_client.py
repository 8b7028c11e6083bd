from __future__ import annotations

from collections.abc import Iterator

import httpx
import pytest
from flask import Flask

from linkportal.interfaces.client import ApiError, LinkPortalClient


@pytest.fixture()
def api(app: Flask) -> Iterator[LinkPortalClient]:
    with LinkPortalClient("http://testserver", transport=httpx.WSGITransport(app=app)) as client:
        yield client


def test_client_session_round_trip(api: LinkPortalClient) -> None:
    assert api.current_user() is None

    assert api.register("alice", "pw123") == {"id": 1, "username": "alice"}
    assert api.current_user() == {"id": 1, "username": "alice"}

    created = api.create_link("example.com", "Example")
    assert created["url"] == "https://example.com"

    updated = api.update_link(created["id"], "https://example.org")
    assert updated["url"] == "https://example.org"
    assert updated["title"] is None

    api.logout()
    assert api.current_user() is None

    api.login("alice", "pw123")
    assert [link["id"] for link in api.list_links()] == [created["id"]]
    assert api.delete_link(created["id"]) == {"success": True}
    assert api.list_links() == []


def test_client_raises_api_error(api: LinkPortalClient) -> None:
    with pytest.raises(ApiError) as unauthenticated:
        api.list_links()
    assert unauthenticated.value.status == 401
    assert unauthenticated.value.code == "unauthorized"

    api.register("alice", "pw123")
    with pytest.raises(ApiError) as missing:
        api.delete_link(42)
    assert missing.value.status == 404
    assert missing.value.message == "Not found"

    with pytest.raises(ApiError) as bad_login:
        api.login("alice", "wrong")
    assert bad_login.value.status == 401
    assert bad_login.value.message == "Incorrect username or password"
