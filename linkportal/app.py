# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask, Response
from flask_cors import CORS

from linkportal.container import Container
from linkportal.shared.config import AppConfig, load_config
from linkportal.shared.logging import logger, setup_logging
from linkportal.shared.middleware import configure_error_handling, configure_request_logging

EXTENSION_KEY = "linkportal"


def create_app(config: AppConfig | None = None) -> Flask:
    config = config or load_config()
    setup_logging(level=config.log_level, log_file=config.log_file)

    container = Container(config)
    container.database.init_db()
    container.session_store.purge_expired()

    app = Flask(__name__)
    app.config.update(SECRET_KEY=config.secret_key)
    app.extensions[EXTENSION_KEY] = container

    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)

    cors_kwargs: dict[str, object] = {
        "resources": {r"/api/*": {"origins": config.security.allowed_origins}}
    }
    if "*" not in config.security.allowed_origins:
        cors_kwargs["supports_credentials"] = True
    CORS(app, **cors_kwargs)
    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.links_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp: Response) -> Response:
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains",
            )
        return resp

    logger.info(f"Flask app initialized (env={config.app_env})")
    return app


def get_container(app: Flask) -> Container:
    return app.extensions[EXTENSION_KEY]


def main() -> None:
    config = load_config()
    app = create_app(config)
    app.run(host=config.host, port=config.port, debug=not config.is_production())


if __name__ == "__main__":
    main()
