"""API routers for UI-facing endpoints."""

from membership_engine.app.api.routers.classification import router as classification_router

__all__ = ["classification_router"]
