import threading

from .chat_message import ChatMessage


class ChatLog:
    """
    Append-only, in-memory sequence of chat messages.
    Lives for the lifetime of the process; nothing is ever edited or removed.
    """

    def __init__(self):
        self._messages = []
        self._lock = threading.Lock()

    def append(self, message: ChatMessage) -> int:
        """Append a message and return the new length of the log."""
        with self._lock:
            self._messages.append(message)
            return len(self._messages)

    def snapshot(self):
        """Copy of the log in append order."""
        with self._lock:
            return list(self._messages)

    def to_list(self):
        return [message.to_dict() for message in self.snapshot()]

    def __len__(self):
        with self._lock:
            return len(self._messages)

    def __iter__(self):
        return iter(self.snapshot())
