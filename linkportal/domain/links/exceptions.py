# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from linkportal.shared.errors.base import NotFoundError


class LinkNotFoundError(NotFoundError):
    """Raised when no link with the id is owned by the caller."""

    def __init__(self, link_id: int) -> None:
        super().__init__()
        self.link_id = link_id
