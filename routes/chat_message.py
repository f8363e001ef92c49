from flask import Blueprint, jsonify

from . import get_chat_state


chat_message_api_bp = Blueprint("chat_message", __name__)


# =================================
#    Chat Message Endpoints
# =================================


@chat_message_api_bp.route("/api/chatHistory", methods=["GET"])
def get_chat_history():
    """
    Return the full chat log in append order.
    """
    return jsonify({"history": get_chat_state().hub.history()}), 200
