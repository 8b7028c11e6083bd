from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

from linkportal.app import create_app, get_container
from linkportal.shared.config import AppConfig, DatabaseConfig


@pytest.fixture()
def config(tmp_path: Path) -> AppConfig:
    return AppConfig(
        app_env="test",
        log_level="WARNING",
        # production default is scrypt
        password_hash_method="pbkdf2:sha256:1000",
        database=DatabaseConfig(url=f"sqlite:///{tmp_path / 'portal.db'}"),
    )


@pytest.fixture()
def app(config: AppConfig) -> Iterator[Flask]:
    flask_app = create_app(config)
    flask_app.config.update(TESTING=True)
    yield flask_app
    get_container(flask_app).database.dispose()


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()
