# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from linkportal.domain.links.entities import Link
from linkportal.domain.links.repositories import LinkRepository


class ListLinksUseCase:
    def __init__(self, *, links: LinkRepository) -> None:
        self._links = links

    def execute(self, caller_id: int) -> Sequence[Link]:
        return self._links.list_for_owner(caller_id)
