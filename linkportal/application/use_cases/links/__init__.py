# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .create_link import CreateLinkUseCase
from .delete_link import DeleteLinkUseCase
from .list_links import ListLinksUseCase
from .update_link import UpdateLinkUseCase

__all__ = [
    "CreateLinkUseCase",
    "DeleteLinkUseCase",
    "ListLinksUseCase",
    "UpdateLinkUseCase",
]
