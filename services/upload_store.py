import logging
import os
import re
import time
import uuid
from dataclasses import dataclass

from .errors import StorageError, UploadError

logger = logging.getLogger("smartchat")


@dataclass
class StoredUpload:
    filename: str
    path: str
    url: str
    size_bytes: int


def safe_upload_name(original_name):
    """
    Unique, URL-safe name: "<epoch ms>-<random hex>-<original name>".
    Whitespace runs become underscores and directory parts are dropped.
    """
    base = os.path.basename(original_name.replace("\\", "/"))
    base = re.sub(r"\s+", "_", base) or "file"
    token = f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}"
    return f"{token}-{base}"


class UploadStore:
    """Writes uploaded files into a publicly served directory."""

    def __init__(self, upload_dir, url_prefix="/uploads"):
        self.upload_dir = upload_dir
        self.url_prefix = url_prefix.rstrip("/")

    def ensure_directory(self):
        if not os.path.isdir(self.upload_dir):
            os.makedirs(self.upload_dir, exist_ok=True)
            logger.info("Created uploads directory: %s", self.upload_dir)

    def save(self, file_storage) -> StoredUpload:
        """
        Persist a werkzeug FileStorage and return where it can be fetched.
        Raises UploadError when there is no file, StorageError when the
        write fails.
        """
        if file_storage is None or not file_storage.filename:
            raise UploadError("No file uploaded")

        filename = safe_upload_name(file_storage.filename)
        path = os.path.join(self.upload_dir, filename)
        try:
            file_storage.save(path)
            size = os.path.getsize(path)
        except OSError as e:
            self._discard(path)
            raise StorageError(f"Could not write upload {filename}") from e

        return StoredUpload(
            filename=filename,
            path=path,
            url=f"{self.url_prefix}/{filename}",
            size_bytes=size,
        )

    def _discard(self, path):
        """Remove a partially written upload so it is never served."""
        try:
            os.remove(path)
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning("Could not remove partial upload %s: %s", path, e)
