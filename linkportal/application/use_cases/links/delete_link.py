# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from linkportal.domain.links.exceptions import LinkNotFoundError
from linkportal.domain.links.repositories import LinkRepository


class DeleteLinkUseCase:
    def __init__(self, *, links: LinkRepository) -> None:
        self._links = links

    def execute(self, caller_id: int, link_id: int) -> None:
        if not self._links.delete_owned(caller_id, link_id):
            raise LinkNotFoundError(link_id)
