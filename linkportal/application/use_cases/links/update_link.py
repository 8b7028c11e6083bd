# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from linkportal.domain.links.entities import Link, normalize_title, normalize_url
from linkportal.domain.links.exceptions import LinkNotFoundError
from linkportal.domain.links.repositories import LinkRepository
from linkportal.shared.errors import ValidationError


class UpdateLinkUseCase:
    def __init__(self, *, links: LinkRepository) -> None:
        self._links = links

    def execute(
        self, caller_id: int, link_id: int, url: str, title: str | None = None
    ) -> Link:
        if not url:
            raise ValidationError(context={"fields": ["url"]})
        link = self._links.update_owned(
            caller_id, link_id, normalize_url(url), normalize_title(title)
        )
        if link is None:
            raise LinkNotFoundError(link_id)
        return link
