# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask
from flask_cors import CORS
from werkzeug.middleware.proxy_fix import ProxyFix

from lifelog.container import Container
from lifelog.shared.config import AppConfig, load_config
from lifelog.shared.logging import logger, setup_logging
from lifelog.shared.middleware.error_handler import configure_error_handling
from lifelog.shared.middleware.request_logger import configure_request_logging
from lifelog.shared.middleware.security_headers import configure_security_headers


def create_app(
    config: AppConfig | None = None,
    *,
    container: Container | None = None,
) -> Flask:
    config = config or (container.config if container else load_config())
    container = container or Container(config)

    setup_logging(
        "DEBUG" if config.debug_logging else config.log_level,
        log_file=config.log_file,
    )
    container.database.init_schema()

    app = Flask(__name__)
    app.json.sort_keys = False
    app.extensions["lifelog"] = container

    proxies = config.security.trusted_proxy_count
    if proxies:
        app.wsgi_app = ProxyFix(  # type: ignore[method-assign]
            app.wsgi_app, x_for=proxies, x_proto=proxies
        )

    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)
    configure_security_headers(app, enable_hsts=config.security.enable_hsts)

    origins = config.security.allowed_origins
    if config.is_production() and "*" in origins:
        logger.warning("ALLOWED_ORIGINS allows wildcard (*) origins in production")
    CORS(
        app,
        origins=origins,
        allow_headers=["Authorization", "Content-Type"],
        methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    )

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.quotes_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    for controller in container.resource_controllers:
        app.register_blueprint(controller.as_blueprint())

    logger.info(f"Flask app initialized (env={config.app_env})")
    return app
