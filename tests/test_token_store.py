try:
    from . import _bootstrap  # noqa: F401
except Exception:  # pragma: no cover - fallback for direct execution
    import _bootstrap  # type: ignore # noqa: F401

import sqlite3

import pytest

from amanat_admin.clients import (
    MemoryTokenStore,
    NullTokenStore,
    SQLiteTokenStore,
    TokenCipher,
    TokenKind,
)
from amanat_admin.core.config import TokenStorageSettings
from amanat_admin.dependencies import get_token_store


@pytest.mark.parametrize("backend", ["memory", "sqlite"])
def test_store_round_trip_and_clear(backend, tmp_path) -> None:
    if backend == "memory":
        store = MemoryTokenStore()
    else:
        store = SQLiteTokenStore(str(tmp_path / "session.db"))
    assert store.get(TokenKind.ACCESS) is None

    store.set(TokenKind.ACCESS, "access")
    store.set(TokenKind.REFRESH, "refresh")
    store.set(TokenKind.ACCESS, "access-rotated")

    assert store.get(TokenKind.ACCESS) == "access-rotated"
    assert store.get(TokenKind.REFRESH) == "refresh"

    store.clear()
    assert store.get(TokenKind.ACCESS) is None
    assert store.get(TokenKind.REFRESH) is None


def test_sqlite_store_survives_new_instance(tmp_path) -> None:
    db_path = tmp_path / "profile" / "session.db"
    SQLiteTokenStore(str(db_path)).set(TokenKind.REFRESH, "long-lived")

    assert SQLiteTokenStore(str(db_path)).get(TokenKind.REFRESH) == "long-lived"


def test_sqlite_store_encrypts_tokens_at_rest(tmp_path) -> None:
    db_path = tmp_path / "session.db"
    store = SQLiteTokenStore(str(db_path), cipher=TokenCipher(secret="profile-secret"))
    store.set(TokenKind.ACCESS, "plain-access")

    with sqlite3.connect(db_path) as conn:
        (raw,) = conn.execute(
            "SELECT value FROM session_tokens WHERE key = ?", ("amanat_access_token",)
        ).fetchone()
    assert raw != "plain-access"
    assert store.get(TokenKind.ACCESS) == "plain-access"

    other = SQLiteTokenStore(str(db_path), cipher=TokenCipher(secret="different"))
    assert other.get(TokenKind.ACCESS) is None


def test_custom_keys_are_used(tmp_path) -> None:
    db_path = tmp_path / "session.db"
    keys = {TokenKind.ACCESS: "console_access", TokenKind.REFRESH: "console_refresh"}
    SQLiteTokenStore(str(db_path), keys=keys).set(TokenKind.ACCESS, "token")

    with sqlite3.connect(db_path) as conn:
        rows = conn.execute("SELECT key FROM session_tokens").fetchall()
    assert rows == [("console_access",)]


def test_null_store_never_holds_anything() -> None:
    store = NullTokenStore()
    store.set(TokenKind.ACCESS, "ignored")
    store.clear()

    assert store.get(TokenKind.ACCESS) is None


def test_factory_honours_backend_setting(tmp_path) -> None:
    assert isinstance(get_token_store(TokenStorageSettings(backend="memory")), MemoryTokenStore)
    assert isinstance(get_token_store(TokenStorageSettings(backend="none")), NullTokenStore)

    store = get_token_store(
        TokenStorageSettings(
            backend="sqlite",
            db_path=str(tmp_path / "s.db"),
            encryption_secret="secret",
        )
    )
    assert isinstance(store, SQLiteTokenStore)
    store.set(TokenKind.REFRESH, "value")
    assert store.get(TokenKind.REFRESH) == "value"
