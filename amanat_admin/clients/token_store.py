"""
Storage for the access and refresh tokens that make up a console session.

Tokens are opaque strings. Nothing here inspects or validates them.
"""

from __future__ import annotations

import logging
import sqlite3
from enum import Enum
from pathlib import Path
from typing import Dict, Mapping, Optional

from amanat_admin.clients.token_cipher import TokenCipher

logger = logging.getLogger(__name__)


class TokenKind(str, Enum):
    ACCESS = "access"
    REFRESH = "refresh"


DEFAULT_TOKEN_KEYS: Mapping[TokenKind, str] = {
    TokenKind.ACCESS: "amanat_access_token",
    TokenKind.REFRESH: "amanat_refresh_token",
}


class TokenStore:
    """Key-value wrapper mapping each token kind to a fixed storage key."""

    def __init__(self, keys: Optional[Mapping[TokenKind, str]] = None) -> None:
        self._keys = dict(keys or DEFAULT_TOKEN_KEYS)

    def key_for(self, kind: TokenKind) -> str:
        return self._keys[kind]

    def get(self, kind: TokenKind) -> Optional[str]:
        raise NotImplementedError

    def set(self, kind: TokenKind, token: str) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError


class MemoryTokenStore(TokenStore):
    """Keep tokens for the lifetime of the process only."""

    def __init__(self, keys: Optional[Mapping[TokenKind, str]] = None) -> None:
        super().__init__(keys)
        self._values: Dict[str, str] = {}

    def get(self, kind: TokenKind) -> Optional[str]:
        return self._values.get(self.key_for(kind))

    def set(self, kind: TokenKind, token: str) -> None:
        self._values[self.key_for(kind)] = token

    def clear(self) -> None:
        for kind in TokenKind:
            self._values.pop(self.key_for(kind), None)


class NullTokenStore(TokenStore):
    """Store used where no persistent storage exists: reads nothing, keeps nothing."""

    def get(self, kind: TokenKind) -> Optional[str]:
        return None

    def set(self, kind: TokenKind, token: str) -> None:
        return None

    def clear(self) -> None:
        return None


class SQLiteTokenStore(TokenStore):
    """Persist tokens in a SQLite file so a session survives process restarts."""

    def __init__(
        self,
        db_path: str,
        *,
        cipher: Optional[TokenCipher] = None,
        keys: Optional[Mapping[TokenKind, str]] = None,
    ) -> None:
        super().__init__(keys)
        self._db_path = Path(db_path)
        self._cipher = cipher
        if self._db_path.parent and not self._db_path.parent.exists():
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self._db_path, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        return conn

    def _ensure_schema(self) -> None:
        with self._connect() as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS session_tokens (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
                """
            )

    def get(self, kind: TokenKind) -> Optional[str]:
        with self._connect() as conn:
            row = conn.execute(
                "SELECT value FROM session_tokens WHERE key = ?",
                (self.key_for(kind),),
            ).fetchone()
        if not row:
            return None
        if self._cipher is None:
            return row["value"]
        try:
            return self._cipher.open(row["value"])
        except ValueError:
            logger.warning("Ignoring unreadable %s token in %s", kind.value, self._db_path)
            return None

    def set(self, kind: TokenKind, token: str) -> None:
        value = self._cipher.seal(token) if self._cipher else token
        with self._connect() as conn:
            conn.execute(
                """
                INSERT INTO session_tokens (key, value)
                VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value
                """,
                (self.key_for(kind), value),
            )

    def clear(self) -> None:
        with self._connect() as conn:
            conn.executemany(
                "DELETE FROM session_tokens WHERE key = ?",
                [(self.key_for(kind),) for kind in TokenKind],
            )


__all__ = [
    "DEFAULT_TOKEN_KEYS",
    "MemoryTokenStore",
    "NullTokenStore",
    "SQLiteTokenStore",
    "TokenKind",
    "TokenStore",
]
