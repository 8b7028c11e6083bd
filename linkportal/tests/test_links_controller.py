from __future__ import annotations

from datetime import UTC, datetime

import pytest
from flask import Flask

from linkportal.domain.links.entities import Link
from linkportal.domain.links.exceptions import LinkNotFoundError
from linkportal.interfaces.http.controllers.links_controller import LinksController
from linkportal.shared.middleware.error_handler import configure_error_handling
from linkportal.tests.stubs import COOKIE_NAME, make_gate, make_user, mock_use_case

NOW = datetime(2025, 1, 2, 3, 4, 5, tzinfo=UTC)


def _link(link_id: int = 1, url: str = "https://example.com", title: str | None = "Example"):
    return Link(id=link_id, owner_id=1, url=url, title=title, created_at=NOW, updated_at=NOW)


class Harness:
    def __init__(self) -> None:
        self.list = mock_use_case()
        self.create = mock_use_case()
        self.update = mock_use_case()
        self.delete = mock_use_case()
        self.app = Flask(__name__)
        configure_error_handling(self.app)
        controller = LinksController(
            gate=make_gate({"tok-1": make_user(1, "alice")}),
            list_use_case=self.list,
            create_use_case=self.create,
            update_use_case=self.update,
            delete_use_case=self.delete,
        )
        self.app.register_blueprint(controller.as_blueprint())

    def client(self, *, authed: bool = True):
        client = self.app.test_client()
        if authed:
            client.set_cookie(COOKIE_NAME, "tok-1")
        return client


@pytest.fixture()
def harness() -> Harness:
    return Harness()


@pytest.mark.parametrize(
    ("method", "path"),
    [
        ("get", "/api/links"),
        ("post", "/api/links"),
        ("put", "/api/links/1"),
        ("delete", "/api/links/1"),
    ],
)
def test_every_link_route_requires_authentication(
    harness: Harness, method: str, path: str
) -> None:
    client = harness.client(authed=False)
    client.set_cookie(COOKIE_NAME, "forged")

    response = getattr(client, method)(path, json={"url": "x"})

    assert response.status_code == 401
    assert response.get_json() == {"error": "Not authenticated", "code": "unauthorized"}
    for use_case in (harness.list, harness.create, harness.update, harness.delete):
        use_case.execute.assert_not_called()


def test_list_links_serializes_camel_case(harness: Harness) -> None:
    harness.list.execute.return_value = [_link()]

    response = harness.client().get("/api/links")

    assert response.status_code == 200
    assert response.get_json() == [
        {
            "id": 1,
            "url": "https://example.com",
            "title": "Example",
            "ownerId": 1,
            "createdAt": "2025-01-02T03:04:05Z",
            "updatedAt": "2025-01-02T03:04:05Z",
        }
    ]
    harness.list.execute.assert_called_once_with(1)


def test_create_link_passes_caller_and_payload(harness: Harness) -> None:
    harness.create.execute.return_value = _link()

    response = harness.client().post("/api/links", json={"url": "example.com", "title": "Example"})

    assert response.status_code == 200
    assert response.get_json()["url"] == "https://example.com"
    harness.create.execute.assert_called_once_with(1, "example.com", "Example")


def test_create_link_without_url_returns_400(harness: Harness) -> None:
    response = harness.client().post("/api/links", json={"title": "No url"})

    assert response.status_code == 400
    assert response.get_json()["context"]["fields"] == ["url"]
    harness.create.execute.assert_not_called()


def test_update_missing_link_returns_404(harness: Harness) -> None:
    harness.update.execute.side_effect = LinkNotFoundError(5)

    response = harness.client().put("/api/links/5", json={"url": "x.example"})

    assert response.status_code == 404
    assert response.get_json() == {"error": "Not found", "code": "not_found"}
    harness.update.execute.assert_called_once_with(1, 5, "x.example", None)


def test_delete_link_returns_success(harness: Harness) -> None:
    response = harness.client().delete("/api/links/3")

    assert response.status_code == 200
    assert response.get_json() == {"success": True}
    harness.delete.execute.assert_called_once_with(1, 3)


def test_delete_missing_link_returns_404(harness: Harness) -> None:
    harness.delete.execute.side_effect = LinkNotFoundError(3)

    response = harness.client().delete("/api/links/3")

    assert response.status_code == 404
