"""FastAPI REST API for room estimates.

Usage:
    uvicorn renobudget.web:app --reload
"""

from renobudget.web.app import app, create_app

__all__ = ["app", "create_app"]
