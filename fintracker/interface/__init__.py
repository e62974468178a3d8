"""Mini README: Interactive interfaces for the financial tracker.

Exports the FastAPI application factory that powers the browser page and the
JSON API.
"""

from .web_app import create_application

__all__ = ["create_application"]
