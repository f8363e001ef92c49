import logging
import os

from flask import Flask
from flask_cors import CORS

from config import Config
from routes import other_api_bp
from routes.chat_message import chat_message_api_bp
from routes.realtime import socketio
from routes.upload import upload_api_bp
from routes.user import user_api_bp
from services import build_chat_state


logger = logging.getLogger("smartchat")


def configure_logging(level):
    logging.basicConfig(
        level=level, format="[%(asctime)s] %(levelname)s - %(message)s"
    )
    logger.setLevel(level)


def cors_origins(value):
    if not value or value == "*":
        return "*"
    return [origin.strip() for origin in value.split(",") if origin.strip()]


def create_app(test_config=None, scorer=None):
    app = Flask(
        __name__,
        static_folder=os.path.abspath(Config.FRONTEND_DIR),
        static_url_path="",
    )
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)
        app.static_folder = os.path.abspath(app.config["FRONTEND_DIR"])

    configure_logging(app.config["LOG_LEVEL"])

    origins = cors_origins(app.config["CORS_ORIGINS"])
    CORS(app, origins=origins)
    socketio.init_app(app, cors_allowed_origins=origins)

    # One state object per app; handlers reach it through current_app.
    app.chat_state = build_chat_state(app.config, socketio.emit, scorer=scorer)
    app.chat_state.upload_store.ensure_directory()

    # Register your Blueprints
    app.register_blueprint(other_api_bp)
    app.register_blueprint(chat_message_api_bp)
    app.register_blueprint(upload_api_bp)
    app.register_blueprint(user_api_bp)

    return app


def socketio_run_options(app):
    options = {"host": app.config["HOST"], "port": app.config["PORT"]}
    if app.debug or app.config["ALLOW_UNSAFE_WERKZEUG"]:
        options["allow_unsafe_werkzeug"] = True
    return options


if __name__ == "__main__":
    app = create_app()
    logger.info(
        "Backend running at http://localhost:%s", app.config["PORT"]
    )
    logger.info("Serving frontend from: %s", app.static_folder)
    logger.info("Serving uploads from: %s", app.config["UPLOAD_FOLDER"])
    socketio.run(app, **socketio_run_options(app))
