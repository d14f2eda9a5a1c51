from __future__ import annotations

from dataclasses import dataclass, field

from membership_engine.domain.classification import rules


def _default_term_days() -> dict[str, int]:
    return {
        rules.PAYMENT_ANNUAL: 365,
        rules.PAYMENT_SEMI_ANNUAL: 180,
        rules.PAYMENT_MONTHLY: 30,
    }


@dataclass(frozen=True)
class ClassificationConfig:
    primitive_name: str = "membership_classification"
    primitive_version: str = "1.0.0"
    term_days: dict[str, int] = field(default_factory=_default_term_days)
    session_pack_fallback_days: int = 30
    fallback_duration_days: int = 30
