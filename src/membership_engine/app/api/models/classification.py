"""Pydantic models for membership classification requests and responses."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from membership_engine.domain.classification.model import (
    AccessGrant,
    ClassificationResult,
    PlanDescriptor,
)


class AccessGrantPayload(BaseModel):
    """A section or group reference as the backend returns it."""

    id: int
    name: str = ""
    type: Literal["section", "group"] | None = Field(
        None, description="Inferred from the list the grant appears in when omitted"
    )


class PlanPayload(BaseModel):
    """Coverage and terms of a membership or tariff."""

    included_groups: list[AccessGrantPayload] = Field(default_factory=list)
    included_sections: list[AccessGrantPayload] = Field(default_factory=list)
    package_type: str = Field(..., description="single_group/multiple_groups/full_section/full_club")
    payment_type: str = Field(..., description="monthly/semi_annual/annual/session_pack")
    duration_days: int | None = Field(None, gt=0, description="Explicit duration, required for session packs")
    price: float = 0.0

    def to_domain(self) -> PlanDescriptor:
        return PlanDescriptor.new(
            package_type=self.package_type,
            payment_type=self.payment_type,
            included_groups=[AccessGrant(id=g.id, name=g.name, type=g.type or "group") for g in self.included_groups],
            included_sections=[
                AccessGrant(id=s.id, name=s.name, type=s.type or "section") for s in self.included_sections
            ],
            duration_days=self.duration_days,
            price=self.price,
        )


class ClassifyRequest(BaseModel):
    current: PlanPayload
    candidate: PlanPayload
    current_end_date: str | None = Field(None, description="YYYY-MM-DD end date of the current membership")


class ClassifyBatchRequest(BaseModel):
    current: PlanPayload
    candidates: list[PlanPayload]
    current_end_date: str | None = Field(None, description="YYYY-MM-DD end date of the current membership")


class ClassificationResponse(BaseModel):
    kind: str = Field(..., description="UPGRADE/BUY_ANOTHER/RENEW/SAME")
    reason: str
    rule_id: str
    scheduled_start_date: str | None = Field(None, description="YYYY-MM-DD, only for UPGRADE")

    @classmethod
    def from_result(cls, result: ClassificationResult) -> "ClassificationResponse":
        return cls(
            kind=result.kind,
            reason=result.reason,
            rule_id=result.rule_id,
            scheduled_start_date=result.scheduled_start_date,
        )


class ClassifyBatchResponse(BaseModel):
    items: list[ClassificationResponse]
