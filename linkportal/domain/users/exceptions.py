# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from linkportal.shared.errors.base import DomainError


class DuplicateUsernameError(DomainError):
    code = "duplicate_username"
    message = "Username already exists"


class InvalidCredentialsError(DomainError):
    code = "invalid_credentials"
    status = HTTPStatus.UNAUTHORIZED
    message = "Incorrect username or password"
