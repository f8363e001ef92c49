from .errors import (
    ChatServerError,
    ValidationError,
    UploadError,
    StorageError,
    ScoringError,
)
from .sentiment import SentimentScorer
from .upload_store import UploadStore, StoredUpload
from .chat_hub import ChatHub
from .state import ChatState, build_chat_state
