import logging

from flask import Blueprint, request, jsonify

from services.errors import StorageError, UploadError
from . import get_chat_state


upload_api_bp = Blueprint("upload", __name__)
logger = logging.getLogger("smartchat")


# =================================
#       Upload Endpoints
# =================================


@upload_api_bp.route("/api/upload", methods=["POST"])
def upload_file():
    """
    Multipart field "file". Returns { fileUrl } for embedding in a chat
    message.
    """
    try:
        stored = get_chat_state().upload_store.save(request.files.get("file"))
    except UploadError as e:
        return jsonify({"error": str(e)}), 400
    except StorageError:
        logger.exception("Upload error")
        return jsonify({"error": "Upload failed"}), 500

    logger.info("Stored upload %s (%s bytes)", stored.filename, stored.size_bytes)
    return jsonify({"fileUrl": stored.url}), 200
