"""
Chirp API package.

Provides the FastAPI application factory for the Chirp social API.
"""

from .app import create_app

__all__ = ["create_app"]
