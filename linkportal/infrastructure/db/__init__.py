# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .session import Base, Database
from .models import LinkRecord, SessionRecord, UserRecord  # noqa: E402

__all__ = ["Base", "Database", "LinkRecord", "SessionRecord", "UserRecord"]
