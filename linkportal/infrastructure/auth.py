# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar, cast

from flask import g, request

from linkportal.application.use_cases.users.current_user import CurrentUserUseCase
from linkportal.domain.users.entities import User
from linkportal.shared.errors import UnauthorizedError
from linkportal.shared.logging import logger

F = TypeVar("F", bound=Callable[..., Any])


def read_session_token(cookie_name: str) -> str:
    auth = request.headers.get("Authorization", "")
    if auth.startswith("Bearer "):
        bearer = auth[7:].strip()
        if bearer:
            return bearer
    return request.cookies.get(cookie_name, "")


class AuthGate:
    """Single authentication check shared by every protected view."""

    def __init__(self, *, current_user: CurrentUserUseCase, cookie_name: str) -> None:
        self._current_user = current_user
        self.cookie_name = cookie_name

    def resolve(self) -> User | None:
        token = read_session_token(self.cookie_name)
        if not token:
            return None
        user = self._current_user.execute(token)
        if user is not None:
            g.user_id = user.id
            g.current_user = user
        return user

    def required(self, view: F) -> F:
        @wraps(view)
        def inner(*args: Any, **kwargs: Any) -> Any:
            user = self.resolve()
            if user is None:
                logger.warning(
                    f"auth.gate: rejected {request.method} {request.path} "
                    f"from {request.headers.get('X-Forwarded-For', request.remote_addr)}"
                )
                raise UnauthorizedError()
            logger.debug(f"auth.gate: ok user={user.id} {request.method} {request.path}")
            return view(*args, **kwargs)

        return cast(F, inner)


def current_caller() -> User:
    """Return the user stored by :meth:`AuthGate.required` for this request."""

    return cast(User, g.current_user)
