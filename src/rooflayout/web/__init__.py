"""FastAPI REST API for roof layout generation.

Usage:
    uvicorn rooflayout.web:app --reload
"""

from rooflayout.web.app import app, create_app

__all__ = ["app", "create_app"]
