# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from linkportal.application.use_cases.users.login_user import LoginUserUseCase
from linkportal.application.use_cases.users.logout_user import LogoutUserUseCase
from linkportal.application.use_cases.users.register_user import RegisterUserUseCase
from linkportal.infrastructure.auth import AuthGate, read_session_token
from linkportal.interfaces.http.dto.auth import (
    LoginRequestDTO,
    MessageDTO,
    RegisterRequestDTO,
    UserDTO,
)
from linkportal.shared.config import SecurityConfig, SessionConfig
from linkportal.shared.errors import UnauthorizedError
from linkportal.shared.errors.validation import raise_validation_error
from linkportal.shared.logging import logger


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        logout_use_case: LogoutUserUseCase,
        gate: AuthGate,
        session_config: SessionConfig,
        security_config: SecurityConfig,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._logout_use_case = logout_use_case
        self._gate = gate
        self._session_config = session_config
        self._security_config = security_config

    def _set_session_cookie(self, response: Response, token: str) -> None:
        response.set_cookie(
            self._session_config.cookie_name,
            token,
            httponly=True,
            samesite=self._security_config.cookie_samesite,
            secure=self._security_config.cookie_secure,
            max_age=self._session_config.lifetime,
        )

    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        user, token = self._register_use_case.execute(dto.username, dto.password)

        response = jsonify(UserDTO.from_entity(user).model_dump())
        self._set_session_cookie(response, token)
        logger.info(f"auth.register: ok user_id={user.id}")
        return response, 200

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        user, token = self._login_use_case.execute(dto.username, dto.password)

        response = jsonify(UserDTO.from_entity(user).model_dump())
        self._set_session_cookie(response, token)
        logger.info(f"auth.login: ok user_id={user.id}")
        return response, 200

    def logout(self) -> tuple[Response, int]:
        token = read_session_token(self._session_config.cookie_name)

        self._logout_use_case.execute(token)

        response = jsonify(MessageDTO(message="Logged out").model_dump())
        response.delete_cookie(
            self._session_config.cookie_name,
            httponly=True,
            samesite=self._security_config.cookie_samesite,
            secure=self._security_config.cookie_secure,
        )
        logger.info("auth.logout: ok")
        return response, 200

    def current_user(self) -> tuple[Response, int]:
        user = self._gate.resolve()
        if user is None:
            raise UnauthorizedError("Not logged in")
        return jsonify(UserDTO.from_entity(user).model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/logout", view_func=self.logout, methods=["POST"])
        bp.add_url_rule("/user", view_func=self.current_user, methods=["GET"])
        return bp
