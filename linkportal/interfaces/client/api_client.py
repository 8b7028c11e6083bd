# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""HTTP client for the link portal API.

The client keeps the session cookie in its cookie jar, so a successful
``register`` or ``login`` authenticates every later call until ``logout``.
"""

from __future__ import annotations

from typing import Any

import httpx

from linkportal.shared.logging import logger

DEFAULT_TIMEOUT = 10.0


class ApiError(Exception):
    def __init__(self, status: int, message: str, code: str | None = None) -> None:
        super().__init__(f"{status}: {message}")
        self.status = status
        self.message = message
        self.code = code


class LinkPortalClient:
    def __init__(
        self,
        base_url: str,
        *,
        transport: httpx.BaseTransport | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._http = httpx.Client(
            base_url=base_url,
            transport=transport,
            timeout=timeout,
        )

    def __enter__(self) -> LinkPortalClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    def _request(self, method: str, path: str, json: dict | None = None) -> Any:
        response = self._http.request(method, f"/api{path}", json=json)
        if response.is_success:
            return response.json()
        try:
            body = response.json()
        except ValueError:
            body = {}
        message = body.get("error") or response.reason_phrase
        logger.debug(f"client.request: {method} {path} -> {response.status_code}")
        raise ApiError(response.status_code, message, body.get("code"))

    # Auth

    def register(self, username: str, password: str) -> dict:
        return self._request("POST", "/register", {"username": username, "password": password})

    def login(self, username: str, password: str) -> dict:
        return self._request("POST", "/login", {"username": username, "password": password})

    def logout(self) -> dict:
        return self._request("POST", "/logout")

    def current_user(self) -> dict | None:
        try:
            return self._request("GET", "/user")
        except ApiError as exc:
            if exc.status == httpx.codes.UNAUTHORIZED:
                return None
            raise

    # Links

    def list_links(self) -> list[dict]:
        return self._request("GET", "/links")

    def create_link(self, url: str, title: str | None = None) -> dict:
        return self._request("POST", "/links", {"url": url, "title": title})

    def update_link(self, link_id: int, url: str, title: str | None = None) -> dict:
        return self._request("PUT", f"/links/{link_id}", {"url": url, "title": title})

    def delete_link(self, link_id: int) -> dict:
        return self._request("DELETE", f"/links/{link_id}")
