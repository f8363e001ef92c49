class ChatServerError(Exception):
    """Base class for errors raised by the chat server."""


class ValidationError(ChatServerError):
    """A required field is missing from the request."""


class UploadError(ValidationError):
    """The upload request carried no file payload."""


class StorageError(ChatServerError):
    """An uploaded file could not be written to disk."""


class ScoringError(ChatServerError):
    """The sentiment analyzer could not process the text."""
