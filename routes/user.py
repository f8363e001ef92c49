from flask import Blueprint, request, jsonify

from services.auth import login
from . import get_chat_state


user_api_bp = Blueprint("user", __name__)


# =================================
#       User Endpoints
# =================================


@user_api_bp.route("/api/login", methods=["POST"])
def login_user():
    """
    Body: { email, password }
    Always answers 200; failures are reported as { success: false, message }.
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}

    result = login(
        get_chat_state().credentials,
        data.get("email"),
        data.get("password"),
    )
    return jsonify(result), 200
