from __future__ import annotations

import logging
from typing import Optional

from membership_engine.domain.classification import rules
from membership_engine.domain.classification.config import ClassificationConfig
from membership_engine.domain.classification.model import PlanDescriptor, TermDescriptor

logger = logging.getLogger(__name__)


def _resolve(
    payment_type: str, explicit_days: Optional[int], config: ClassificationConfig
) -> tuple[int, bool]:
    if explicit_days is not None:
        return explicit_days, False

    if payment_type in config.term_days:
        return config.term_days[payment_type], False

    if payment_type == rules.PAYMENT_SESSION_PACK:
        logger.warning(
            f"session_pack plan has no duration_days, assuming {config.session_pack_fallback_days} days"
        )
        return config.session_pack_fallback_days, True

    logger.warning(
        f"Unrecognized payment_type {payment_type!r}, assuming {config.fallback_duration_days} days"
    )
    return config.fallback_duration_days, True


def resolve_duration_days(
    payment_type: str,
    explicit_days: Optional[int],
    config: Optional[ClassificationConfig] = None,
) -> int:
    """
    Map a payment cadence (and optional explicit duration) to a day count.

    An explicit duration always wins. Otherwise the config's term table is used
    (annual 365, semi_annual 180, monthly 30 by default). A session pack without
    a duration and an unrecognized payment type both fall back to 30 days and
    are logged as data-quality warnings.
    """
    days, _ = _resolve(payment_type, explicit_days, config or ClassificationConfig())
    return days


def resolve_term(plan: PlanDescriptor, config: Optional[ClassificationConfig] = None) -> TermDescriptor:
    days, used_fallback = _resolve(plan.payment_type, plan.duration_days, config or ClassificationConfig())
    return TermDescriptor(
        payment_type=plan.payment_type,
        explicit_duration_days=plan.duration_days,
        price=plan.price,
        resolved_days=days,
        used_fallback=used_fallback,
    )
