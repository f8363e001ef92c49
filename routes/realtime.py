import logging

from flask import request
from flask_socketio import SocketIO

from services.chat_hub import CHAT_MESSAGE_EVENT
from . import get_chat_state


socketio = SocketIO()
logger = logging.getLogger("smartchat")


# =================================
#    Realtime Chat Events
# =================================


@socketio.on("connect")
def handle_connect(auth=None):
    logger.info("Socket connected: %s", request.sid)
    get_chat_state().hub.connect(request.sid)


@socketio.on(CHAT_MESSAGE_EVENT)
def handle_chat_message(payload=None):
    """
    expected payload: { sender?, text?, fileUrl?, timestamp? }
    """
    message = get_chat_state().hub.publish(payload)
    logger.debug(
        "Chat from %s (sentiment=%s): %s",
        message.sender,
        message.sentiment,
        message.text,
    )


@socketio.on("disconnect")
def handle_disconnect(reason=None):
    logger.info("Socket disconnected: %s", request.sid)
    get_chat_state().hub.disconnect(request.sid)
