# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from time import perf_counter

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from linkportal.application.use_cases.links import (
    CreateLinkUseCase,
    DeleteLinkUseCase,
    ListLinksUseCase,
    UpdateLinkUseCase,
)
from linkportal.infrastructure.auth import AuthGate, current_caller
from linkportal.interfaces.http.dto.links import DeletedDTO, LinkDTO, LinkRequestDTO
from linkportal.shared.errors.validation import raise_validation_error
from linkportal.shared.logging import logger


def _parse_link_payload() -> LinkRequestDTO:
    try:
        return LinkRequestDTO.model_validate(request.get_json(silent=True) or {})
    except ValidationError as exc:
        raise_validation_error(exc)


class LinksController:
    def __init__(
        self,
        *,
        gate: AuthGate,
        list_use_case: ListLinksUseCase,
        create_use_case: CreateLinkUseCase,
        update_use_case: UpdateLinkUseCase,
        delete_use_case: DeleteLinkUseCase,
    ) -> None:
        self._gate = gate
        self._list_use_case = list_use_case
        self._create_use_case = create_use_case
        self._update_use_case = update_use_case
        self._delete_use_case = delete_use_case

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("links", __name__, url_prefix="/api")
        protect = self._gate.required
        bp.add_url_rule(
            "/links", view_func=protect(self.list_links), methods=["GET"], endpoint="links_list"
        )
        bp.add_url_rule(
            "/links", view_func=protect(self.create), methods=["POST"], endpoint="links_create"
        )
        bp.add_url_rule(
            "/links/<int:link_id>",
            view_func=protect(self.update),
            methods=["PUT"],
            endpoint="links_update",
        )
        bp.add_url_rule(
            "/links/<int:link_id>",
            view_func=protect(self.delete),
            methods=["DELETE"],
            endpoint="links_delete",
        )
        return bp

    def list_links(self) -> Response:
        t0 = perf_counter()
        user_id = current_caller().id
        items = self._list_use_case.execute(user_id)
        dt = (perf_counter() - t0) * 1000
        logger.info(f"links.list: ok (user_id={user_id}, n={len(items)}, dt_ms={dt:.0f})")
        return jsonify([LinkDTO.from_entity(link).to_json() for link in items])

    def create(self) -> Response:
        user_id = current_caller().id
        dto = _parse_link_payload()
        link = self._create_use_case.execute(user_id, dto.url, dto.title)
        logger.info(f"links.create: ok (user_id={user_id}, link_id={link.id})")
        return jsonify(LinkDTO.from_entity(link).to_json())

    def update(self, link_id: int) -> Response:
        user_id = current_caller().id
        dto = _parse_link_payload()
        link = self._update_use_case.execute(user_id, link_id, dto.url, dto.title)
        logger.info(f"links.update: ok (user_id={user_id}, link_id={link_id})")
        return jsonify(LinkDTO.from_entity(link).to_json())

    def delete(self, link_id: int) -> Response:
        user_id = current_caller().id
        self._delete_use_case.execute(user_id, link_id)
        logger.info(f"links.delete: ok (user_id={user_id}, link_id={link_id})")
        return jsonify(DeletedDTO().model_dump())
