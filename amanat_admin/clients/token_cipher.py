"""
At-rest protection for the access and refresh tokens kept in the session database.

A copied ``session.db`` is useless without ``AMANAT_TOKEN_ENCRYPTION_SECRET``;
the SQLite store treats anything it cannot open as a missing token.
"""

from __future__ import annotations

import base64
import hashlib

from cryptography.fernet import Fernet, InvalidToken


def _fernet_key(secret: str) -> bytes:
    return base64.urlsafe_b64encode(hashlib.sha256(secret.encode("utf-8")).digest())


class TokenCipher:
    """Fernet wrapper keyed by the configured token encryption secret."""

    def __init__(self, *, secret: str) -> None:
        if not secret:
            raise ValueError("AMANAT_TOKEN_ENCRYPTION_SECRET is empty; cannot seal tokens.")
        self._fernet = Fernet(_fernet_key(secret))

    def seal(self, token: str) -> str:
        return self._fernet.encrypt(token.encode("utf-8")).decode("ascii")

    def open(self, sealed: str) -> str:
        try:
            return self._fernet.decrypt(sealed.encode("ascii")).decode("utf-8")
        except (InvalidToken, UnicodeEncodeError) as exc:
            raise ValueError("Stored token was sealed with a different secret.") from exc


__all__ = ["TokenCipher"]
