# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Link


class LinkRepository(Protocol):
    def list_for_owner(self, owner_id: int) -> Sequence[Link]: ...
    def add(self, owner_id: int, url: str, title: str | None) -> Link: ...

    def update_owned(
        self, owner_id: int, link_id: int, url: str, title: str | None
    ) -> Link | None: ...

    def delete_owned(self, owner_id: int, link_id: int) -> bool: ...
