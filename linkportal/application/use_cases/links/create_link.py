# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from linkportal.domain.links.entities import Link, normalize_title, normalize_url
from linkportal.domain.links.repositories import LinkRepository
from linkportal.shared.errors import ValidationError


class CreateLinkUseCase:
    def __init__(self, *, links: LinkRepository) -> None:
        self._links = links

    def execute(self, caller_id: int, url: str, title: str | None = None) -> Link:
        if not url:
            raise ValidationError(context={"fields": ["url"]})
        return self._links.add(caller_id, normalize_url(url), normalize_title(title))
