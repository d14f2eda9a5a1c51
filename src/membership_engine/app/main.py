from __future__ import annotations

from fastapi import FastAPI

from membership_engine.app.api.routers import classification_router
from membership_engine.app.health import router as health_router
from membership_engine.observability.logging import configure_logging

configure_logging()

app = FastAPI()
app.include_router(health_router)
app.include_router(classification_router, prefix="/v1", tags=["memberships"])
