# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Link entities owned by a single user."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime

_SCHEME_RE = re.compile(r"^https?://")

DEFAULT_SCHEME = "https://"


def normalize_url(url: str) -> str:
    """Prefix ``https://`` unless the value already carries an http(s) scheme.

    Only the prefix is inspected; anything else (spaces, odd hosts) is kept
    as typed. Applying it twice is the same as applying it once.
    """

    if _SCHEME_RE.match(url):
        return url
    return f"{DEFAULT_SCHEME}{url}"


def normalize_title(title: str | None) -> str | None:
    return title or None


@dataclass(slots=True, frozen=True)
class Link:

    id: int
    owner_id: int
    url: str
    title: str | None
    created_at: datetime
    updated_at: datetime

    @property
    def label(self) -> str:
        """Display text for the link: the title, or the URL when untitled."""

        return self.title or self.url
