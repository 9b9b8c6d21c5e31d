"""Async client for the Amanat admin REST API."""

__version__ = "0.1.0"
