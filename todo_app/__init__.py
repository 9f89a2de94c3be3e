"""
To-do list API: an in-memory task store behind a small Flask app.
"""

import logging

from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from .config import Config
from .errors import error_payload, error_status
from .routes import tasks_bp
from .services.repository import TaskRepository

logger = logging.getLogger(__name__)

# Headers from a Werkzeug error page that don't apply to the JSON body
_BODY_HEADERS = {"content-type", "content-length"}


def create_app(
    config_override: dict = None,
    repository: TaskRepository = None,
    config: Config = None,
) -> Flask:
    app = Flask(__name__)
    if config is None:
        config = Config.from_env()
    app.config.update(config.to_flask())
    if config_override:
        app.config.update(config_override)

    CORS(app)

    # One store per app, tests reach it through app.extensions to reset it
    app.extensions["task_repository"] = repository if repository is not None else TaskRepository()

    app.register_blueprint(tasks_bp)

    @app.errorhandler(Exception)
    def handle_error(err):
        status = error_status(err)
        if status >= 500:
            logger.error(f"Unhandled error: {err}", exc_info=True)
        else:
            logger.warning(f"Request failed with {status}: {err}")

        response = jsonify(error_payload(err, status))
        response.status_code = status
        if isinstance(err, HTTPException):
            # Keep headers such as Allow on 405s
            for name, value in err.get_response().headers.items():
                if name.lower() not in _BODY_HEADERS:
                    response.headers[name] = value
        return response

    if not app.config.get("JWT_SECRET"):
        logger.warning("JWT_SECRET is not set, protected routes will reject every token")

    return app
