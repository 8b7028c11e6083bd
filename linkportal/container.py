"""Application dependency container."""

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from linkportal.application.services.password_hashing import WerkzeugPasswordHasher
from linkportal.application.use_cases.links import (
    CreateLinkUseCase,
    DeleteLinkUseCase,
    ListLinksUseCase,
    UpdateLinkUseCase,
)
from linkportal.application.use_cases.users import (
    CurrentUserUseCase,
    LoginUserUseCase,
    LogoutUserUseCase,
    RegisterUserUseCase,
)
from linkportal.infrastructure.auth import AuthGate
from linkportal.infrastructure.db import Database
from linkportal.infrastructure.repositories.links.sqlalchemy_link_repository import (
    SqlAlchemyLinkRepository,
)
from linkportal.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemySessionStore,
    SqlAlchemyUserRepository,
)
from linkportal.interfaces.http.controllers.auth_controller import AuthController
from linkportal.interfaces.http.controllers.links_controller import LinksController
from linkportal.interfaces.http.controllers.misc_controller import MiscController
from linkportal.shared.config import AppConfig


class Container:
    def __init__(self, config: AppConfig) -> None:
        self.config = config

    @cached_property
    def database(self) -> Database:
        return Database(self.config.database)

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher(method=self.config.password_hash_method)

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.database.session_factory)

    @cached_property
    def session_store(self) -> SqlAlchemySessionStore:
        return SqlAlchemySessionStore(
            self.database.session_factory,
            lifetime=timedelta(seconds=self.config.session.lifetime),
        )

    @cached_property
    def link_repository(self) -> SqlAlchemyLinkRepository:
        return SqlAlchemyLinkRepository(self.database.session_factory)

    # Auth use cases

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            sessions=self.session_store,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            sessions=self.session_store,
            password_hasher=self.password_hasher,
            dummy_hash=self.password_hasher.dummy_hash,
        )

    @cached_property
    def logout_user_use_case(self) -> LogoutUserUseCase:
        return LogoutUserUseCase(sessions=self.session_store)

    @cached_property
    def current_user_use_case(self) -> CurrentUserUseCase:
        return CurrentUserUseCase(users=self.user_repository, sessions=self.session_store)

    # Link use cases

    @cached_property
    def list_links_use_case(self) -> ListLinksUseCase:
        return ListLinksUseCase(links=self.link_repository)

    @cached_property
    def create_link_use_case(self) -> CreateLinkUseCase:
        return CreateLinkUseCase(links=self.link_repository)

    @cached_property
    def update_link_use_case(self) -> UpdateLinkUseCase:
        return UpdateLinkUseCase(links=self.link_repository)

    @cached_property
    def delete_link_use_case(self) -> DeleteLinkUseCase:
        return DeleteLinkUseCase(links=self.link_repository)

    # HTTP

    @cached_property
    def auth_gate(self) -> AuthGate:
        return AuthGate(
            current_user=self.current_user_use_case,
            cookie_name=self.config.session.cookie_name,
        )

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            logout_use_case=self.logout_user_use_case,
            gate=self.auth_gate,
            session_config=self.config.session,
            security_config=self.config.security,
        )

    @cached_property
    def links_controller(self) -> LinksController:
        return LinksController(
            gate=self.auth_gate,
            list_use_case=self.list_links_use_case,
            create_use_case=self.create_link_use_case,
            update_use_case=self.update_link_use_case,
            delete_use_case=self.delete_link_use_case,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(engine=self.database.engine)
