# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Session, User
from .exceptions import DuplicateUsernameError, InvalidCredentialsError
from .repositories import PasswordHasher, SessionStore, UserRepository

__all__ = [
    "DuplicateUsernameError",
    "InvalidCredentialsError",
    "PasswordHasher",
    "Session",
    "SessionStore",
    "User",
    "UserRepository",
]
