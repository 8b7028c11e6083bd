# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .api_client import ApiError, LinkPortalClient

__all__ = ["ApiError", "LinkPortalClient"]
