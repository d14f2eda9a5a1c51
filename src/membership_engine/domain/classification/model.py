from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Literal, Optional

from membership_engine.domain.common.ids import GroupId, SectionId

GrantType = Literal["section", "group"]


@dataclass(frozen=True)
class AccessGrant:
    """A section or group a plan grants access to. Identity is (type, id)."""

    id: int
    name: str = field(default="", compare=False)
    type: GrantType = "group"


@dataclass(frozen=True)
class PlanDescriptor:
    """Coverage and terms of a membership or a candidate tariff."""

    included_groups: tuple[AccessGrant, ...]
    included_sections: tuple[AccessGrant, ...]
    package_type: str
    payment_type: str
    duration_days: Optional[int]
    price: float

    @staticmethod
    def new(
        package_type: str,
        payment_type: str,
        included_groups: Optional[Iterable[AccessGrant]] = None,
        included_sections: Optional[Iterable[AccessGrant]] = None,
        duration_days: Optional[int] = None,
        price: float = 0.0,
    ) -> "PlanDescriptor":
        return PlanDescriptor(
            included_groups=tuple(included_groups or ()),
            included_sections=tuple(included_sections or ()),
            package_type=package_type,
            payment_type=payment_type,
            duration_days=duration_days,
            price=price,
        )


@dataclass(frozen=True)
class CoverageDescriptor:
    group_ids: frozenset[GroupId]
    section_ids: frozenset[SectionId]
    package_type: str


@dataclass(frozen=True)
class TermDescriptor:
    payment_type: str
    explicit_duration_days: Optional[int]
    price: float
    resolved_days: int
    used_fallback: bool = False


@dataclass(frozen=True)
class ClassificationResult:
    kind: str  # UPGRADE | BUY_ANOTHER | RENEW | SAME
    reason: str
    rule_id: str
    scheduled_start_date: Optional[str] = None
    metrics: Dict[str, Any] = field(default_factory=dict)
