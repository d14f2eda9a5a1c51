"""Pydantic models for API requests and responses."""

from membership_engine.app.api.models.classification import (
    AccessGrantPayload,
    ClassificationResponse,
    ClassifyBatchRequest,
    ClassifyBatchResponse,
    ClassifyRequest,
    PlanPayload,
)

__all__ = [
    "AccessGrantPayload",
    "PlanPayload",
    "ClassifyRequest",
    "ClassifyBatchRequest",
    "ClassificationResponse",
    "ClassifyBatchResponse",
]
