from .chat_message import ChatMessage, utc_timestamp
from .chat_log import ChatLog
from .user import UserCredential, CredentialTable

__all__ = [
    "ChatMessage",
    "ChatLog",
    "UserCredential",
    "CredentialTable",
    "utc_timestamp",
]
