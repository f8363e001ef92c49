from dataclasses import dataclass


@dataclass(frozen=True)
class UserCredential:
    email: str
    password: str


class CredentialTable:
    """
    Static email/password table loaded once at startup.
    Passwords are stored and compared in plain text (demo-grade auth only).
    """

    def __init__(self, users=None):
        self._credentials = tuple(
            UserCredential(email=u["email"], password=u["password"])
            for u in (users or [])
        )

    def verify(self, email, password):
        # Equality only: request values may be any JSON type.
        return any(
            c.email == email and c.password == password
            for c in self._credentials
        )

    def __len__(self):
        return len(self._credentials)
