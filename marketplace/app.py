# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask, Response
from flask_cors import CORS

from marketplace.container import Container
from marketplace.infrastructure.db import init_db
from marketplace.shared.config import load_config
from marketplace.shared.errors import register_error_handler
from marketplace.shared.logging import logger, setup_logging
from marketplace.shared.middleware.request_logger import configure_request_logging


def create_app(container: Container | None = None) -> Flask:
    config = load_config()
    setup_logging(
        config.logging.level,
        config.logging.file,
        rotation=config.logging.rotation,
        retention=config.logging.retention,
        serialize=config.logging.json_file,
    )
    init_db()

    container = container or Container(config)

    app = Flask(__name__)
    app.json.sort_keys = False
    register_error_handler(app)
    configure_request_logging(app)

    cors_kwargs: dict[str, object] = {
        "resources": {r"/api/*": {"origins": config.security.allowed_origins}}
    }
    CORS(app, **cors_kwargs)

    app.register_blueprint(container.health_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.products_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp: Response) -> Response:
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")

        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )

        return resp

    logger.info("Flask app initialized")
    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=5000, debug=True)
