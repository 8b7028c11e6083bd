# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .current_user import CurrentUserUseCase
from .login_user import LoginUserUseCase
from .logout_user import LogoutUserUseCase
from .register_user import RegisterUserUseCase

__all__ = [
    "CurrentUserUseCase",
    "LoginUserUseCase",
    "LogoutUserUseCase",
    "RegisterUserUseCase",
]
