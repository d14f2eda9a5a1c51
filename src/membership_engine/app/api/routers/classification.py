"""Router for membership classification endpoints."""

from __future__ import annotations

from functools import lru_cache

from fastapi import APIRouter, Depends, HTTPException

from membership_engine.app.api.models.classification import (
    ClassificationResponse,
    ClassifyBatchRequest,
    ClassifyBatchResponse,
    ClassifyRequest,
)
from membership_engine.app.factory import create_classification_service
from membership_engine.application.classification_service import ClassificationService
from membership_engine.application.errors import DateParseError, SectionCatalogError
from membership_engine.settings import get_settings

router = APIRouter()


@lru_cache(maxsize=1)
def get_classification_service() -> ClassificationService:
    """Dependency to provide a shared ClassificationService."""
    return create_classification_service(get_settings())


@router.post(
    "/memberships/classify",
    response_model=ClassificationResponse,
    response_model_exclude_none=True,
)
def classify_membership(
    req: ClassifyRequest,
    service: ClassificationService = Depends(get_classification_service),
) -> ClassificationResponse:
    """
    Classify buying `candidate` while `current` is active.

    Returns kind UPGRADE, BUY_ANOTHER or RENEW with a reason. UPGRADE responses
    include scheduled_start_date when current_end_date was sent.
    """
    try:
        result = service.classify(req.current.to_domain(), req.candidate.to_domain(), req.current_end_date)
    except DateParseError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except SectionCatalogError as e:
        raise HTTPException(status_code=500, detail=f"Section catalog unavailable: {e}")
    return ClassificationResponse.from_result(result)


@router.post(
    "/memberships/classify-batch",
    response_model=ClassifyBatchResponse,
    response_model_exclude_none=True,
)
def classify_membership_batch(
    req: ClassifyBatchRequest,
    service: ClassificationService = Depends(get_classification_service),
) -> ClassifyBatchResponse:
    """Classify every candidate tariff against one membership, in request order."""
    try:
        results = service.classify_many(
            req.current.to_domain(),
            [c.to_domain() for c in req.candidates],
            req.current_end_date,
        )
    except DateParseError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except SectionCatalogError as e:
        raise HTTPException(status_code=500, detail=f"Section catalog unavailable: {e}")
    return ClassifyBatchResponse(items=[ClassificationResponse.from_result(r) for r in results])
