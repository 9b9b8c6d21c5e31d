"""Expose factory helpers for building console clients."""

from .clients import get_request_dispatcher, get_token_cipher, get_token_store

__all__ = ["get_request_dispatcher", "get_token_cipher", "get_token_store"]
