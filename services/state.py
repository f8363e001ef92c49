from dataclasses import dataclass

from models import ChatLog, CredentialTable

from .chat_hub import ChatHub
from .sentiment import SentimentScorer
from .upload_store import UploadStore


@dataclass
class ChatState:
    """Everything the handlers share, owned by one Flask app."""

    chat_log: ChatLog
    credentials: CredentialTable
    upload_store: UploadStore
    scorer: SentimentScorer
    hub: ChatHub


def build_chat_state(config, emit, scorer=None):
    """
    Assemble the state for an app from its config mapping.
    `emit` is the realtime transport's emit(event, payload, to=...) callable.
    """
    chat_log = ChatLog()
    scorer = scorer or SentimentScorer()
    upload_store = UploadStore(
        config["UPLOAD_FOLDER"], config.get("UPLOAD_URL_PREFIX", "/uploads")
    )
    return ChatState(
        chat_log=chat_log,
        credentials=CredentialTable(config.get("USERS")),
        upload_store=upload_store,
        scorer=scorer,
        hub=ChatHub(chat_log, scorer, emit),
    )
