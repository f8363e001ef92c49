import logging
import threading
from dataclasses import replace
from datetime import datetime, timezone

from models import ChatLog, ChatMessage

logger = logging.getLogger("smartchat")

CHAT_HISTORY_EVENT = "chatHistory"
CHAT_MESSAGE_EVENT = "chatMessage"


class ChatHub:
    """
    Realtime fan-out over an explicit registry of connection ids.

    `emit` is called as emit(event, payload, to=connection_id); in the app it
    is SocketIO.emit. The hub is the only writer to the chat log, and append
    plus broadcast run under one lock so log order equals broadcast order.
    """

    def __init__(self, chat_log: ChatLog, scorer, emit):
        self.chat_log = chat_log
        self.scorer = scorer
        self._emit = emit
        self._connections = {}  # connection id -> connected_at
        self._registry_lock = threading.Lock()
        self._publish_lock = threading.Lock()

    def connect(self, connection_id):
        """Register a connection and replay the full history to it alone."""
        with self._publish_lock:
            with self._registry_lock:
                self._connections[connection_id] = datetime.now(timezone.utc)
            self._emit(
                CHAT_HISTORY_EVENT, self.chat_log.to_list(), to=connection_id
            )

    def disconnect(self, connection_id):
        with self._registry_lock:
            self._connections.pop(connection_id, None)

    def connection_ids(self):
        with self._registry_lock:
            return list(self._connections)

    def connection_count(self):
        with self._registry_lock:
            return len(self._connections)

    def broadcast(self, event, payload):
        """Emit to every connection registered when the call started."""
        for connection_id in self.connection_ids():
            try:
                self._emit(event, payload, to=connection_id)
            except Exception as e:
                # A dropped transport is a lifecycle event, not a failure.
                logger.warning(
                    "Failed to deliver %s to %s: %s", event, connection_id, e
                )

    def publish(self, payload) -> ChatMessage:
        """Normalize, score, append, then fan out one inbound message."""
        draft = ChatMessage.from_payload(payload)
        message = replace(draft, sentiment=self.scorer.score(draft.text))
        with self._publish_lock:
            self.chat_log.append(message)
            self.broadcast(CHAT_MESSAGE_EVENT, message.to_dict())
        return message

    def history(self):
        return self.chat_log.to_list()
