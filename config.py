import os
from dotenv import load_dotenv

# Only load .env in development mode (Optional)
if os.getenv("FLASK_ENV") == "development":
    load_dotenv()

BASE_DIR = os.path.abspath(os.path.dirname(__file__))


def parse_chat_users(raw):
    """
    Parse "email:password,email2:password2" into a list of credential dicts.
    Entries without a ':' are ignored.
    """
    users = []
    for entry in (raw or "").split(","):
        email, sep, password = entry.strip().partition(":")
        if sep and email and password:
            users.append({"email": email, "password": password})
    return users


class Config:
    # --------------------------------------
    # Server Settings
    # --------------------------------------
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", 3000))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Werkzeug is a development server; Flask-SocketIO refuses to run it
    # outside debug mode unless this is set.
    ALLOW_UNSAFE_WERKZEUG = (
        os.getenv("ALLOW_UNSAFE_WERKZEUG", "False") == "True"
    )

    # "*" or a comma separated list of allowed origins.
    # Development default; tighten in production.
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")

    # --------------------------------------
    # Static client bundle and uploads
    # --------------------------------------
    FRONTEND_DIR = os.getenv(
        "FRONTEND_DIR", os.path.join(BASE_DIR, "..", "frontend")
    )
    UPLOAD_FOLDER = os.getenv("UPLOAD_FOLDER", os.path.join(BASE_DIR, "uploads"))
    UPLOAD_URL_PREFIX = "/uploads"

    # No size limit unless explicitly configured (bytes).
    MAX_CONTENT_LENGTH = (
        int(os.getenv("MAX_CONTENT_LENGTH"))
        if os.getenv("MAX_CONTENT_LENGTH")
        else None
    )

    # --------------------------------------
    # Demo credential table
    # Plaintext on purpose: demo-grade auth only.
    # --------------------------------------
    USERS = [
        {"email": "user@example.com", "password": "mypassword"},
    ] + parse_chat_users(os.getenv("CHAT_USERS"))

    # --------------------------------------
    # Flask Secret Key
    # (Make sure to set this as an environment variable in production)
    # --------------------------------------
    SECRET_KEY = os.getenv("SECRET_KEY", "default_secret_key")
