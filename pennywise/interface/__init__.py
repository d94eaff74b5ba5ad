"""Mini README: Interactive interfaces for Pennywise.

Exports the FastAPI application factory that powers the browser-based
tracker. Templates and static assets live beside ``web_app``.
"""

from .web_app import create_application

__all__ = ["create_application"]
