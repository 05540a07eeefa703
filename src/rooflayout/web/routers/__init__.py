"""API routers for the REST API."""

from rooflayout.web.routers.layout import router as layout_router
from rooflayout.web.routers.validate import router as validate_router

__all__ = ["layout_router", "validate_router"]
