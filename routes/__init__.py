import os

from flask import Blueprint, jsonify, current_app, send_from_directory


other_api_bp = Blueprint("other", __name__)


# =================================
#         Helper Functions
# =================================


def get_chat_state():
    """
    Helper to retrieve the ChatState owned by the running app.
    """
    return current_app.chat_state


# =================================
#    Client App / Static Endpoints
# =================================


@other_api_bp.route("/", methods=["GET"])
def index():
    """
    Serve the client application's entry document.
    """
    frontend_dir = os.path.abspath(current_app.config["FRONTEND_DIR"])
    return send_from_directory(frontend_dir, "index.html")


@other_api_bp.route("/uploads/<path:filename>", methods=["GET"])
def uploaded_file(filename):
    upload_dir = os.path.abspath(current_app.config["UPLOAD_FOLDER"])
    return send_from_directory(upload_dir, filename)


@other_api_bp.route("/api/health", methods=["GET"])
def health_check():
    state = get_chat_state()
    return jsonify(
        {
            "status": "SmartChat server is running!",
            "messages": len(state.chat_log),
            "connections": state.hub.connection_count(),
        }
    ), 200
