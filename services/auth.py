MISSING_FIELDS_MESSAGE = "Email and password required"
INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"


def login(credentials, email, password):
    """
    Check an email/password pair against the credential table.
    Returns {"success": bool, "message"?: str}; never raises.
    """
    if not email or not password:
        return {"success": False, "message": MISSING_FIELDS_MESSAGE}

    if credentials.verify(email, password):
        return {"success": True}
    return {"success": False, "message": INVALID_CREDENTIALS_MESSAGE}
