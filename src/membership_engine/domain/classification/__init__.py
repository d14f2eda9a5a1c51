from __future__ import annotations

from membership_engine.domain.classification.config import ClassificationConfig
from membership_engine.domain.classification.coverage import (
    are_equal,
    extract_coverage,
    includes_coverage,
    is_strict_superset,
)
from membership_engine.domain.classification.duration import resolve_duration_days, resolve_term
from membership_engine.domain.classification.evaluator import classify, classify_candidates
from membership_engine.domain.classification.model import (
    AccessGrant,
    ClassificationResult,
    CoverageDescriptor,
    PlanDescriptor,
    TermDescriptor,
)
from membership_engine.domain.classification.scheduling import next_start_date, parse_end_date
from membership_engine.domain.classification import rules

__all__ = [
    "AccessGrant",
    "ClassificationConfig",
    "ClassificationResult",
    "CoverageDescriptor",
    "PlanDescriptor",
    "TermDescriptor",
    "are_equal",
    "classify",
    "classify_candidates",
    "extract_coverage",
    "includes_coverage",
    "is_strict_superset",
    "next_start_date",
    "parse_end_date",
    "resolve_duration_days",
    "resolve_term",
    "rules",
]
