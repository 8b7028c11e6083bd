# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Link, normalize_title, normalize_url
from .exceptions import LinkNotFoundError
from .repositories import LinkRepository

__all__ = ["Link", "LinkNotFoundError", "LinkRepository", "normalize_title", "normalize_url"]
