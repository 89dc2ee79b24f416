"""Flask front end for playing Ataxx against the AI."""

from .app import create_app

__all__ = ["create_app"]
