# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime


@dataclass(slots=True, frozen=True)
class User:

    id: int
    username: str
    password_hash: str
    created_at: datetime


@dataclass(slots=True, frozen=True)
class Session:
    """Server-side session bound to an opaque cookie token."""

    token: str
    user_id: int
    created_at: datetime
    expires_at: datetime

    def is_active(self, now: datetime | None = None) -> bool:
        return self.expires_at > (now or datetime.now(UTC))
