from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from membership_engine.domain.classification import rules
from membership_engine.domain.classification.config import ClassificationConfig
from membership_engine.domain.classification.coverage import (
    are_equal,
    extract_coverage,
    includes_coverage,
    is_strict_superset,
)
from membership_engine.domain.classification.duration import resolve_term
from membership_engine.domain.classification.model import (
    ClassificationResult,
    CoverageDescriptor,
    PlanDescriptor,
    TermDescriptor,
)
from membership_engine.domain.classification.scheduling import next_start_date
from membership_engine.domain.common.ids import SectionGroups

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ComparisonContext:
    current: PlanDescriptor
    candidate: PlanDescriptor
    current_coverage: CoverageDescriptor
    candidate_coverage: CoverageDescriptor
    current_term: TermDescriptor
    candidate_term: TermDescriptor
    section_groups: Optional[SectionGroups]


@dataclass(frozen=True)
class RuleMatch:
    kind: str
    rule_id: str
    reason: str


Rule = Callable[[ComparisonContext], Optional[RuleMatch]]


def _broader_coverage(ctx: ComparisonContext) -> Optional[RuleMatch]:
    if not is_strict_superset(ctx.current_coverage, ctx.candidate_coverage, ctx.section_groups):
        return None
    return RuleMatch(
        kind=rules.UPGRADE,
        rule_id=rules.RULE_UPGRADE_BROADER_COVERAGE,
        reason=(
            f"Candidate plan provides broader coverage "
            f"({ctx.candidate.package_type} vs {ctx.current.package_type})"
        ),
    )


def _not_included(ctx: ComparisonContext) -> Optional[RuleMatch]:
    if includes_coverage(ctx.current_coverage, ctx.candidate_coverage, ctx.section_groups):
        return None
    return RuleMatch(
        kind=rules.BUY_ANOTHER,
        rule_id=rules.RULE_BUY_ANOTHER_NOT_INCLUDED,
        reason="Candidate plan does not include current membership coverage",
    )


def _same_coverage_terms(ctx: ComparisonContext) -> Optional[RuleMatch]:
    if not are_equal(ctx.current_coverage, ctx.candidate_coverage):
        return None

    current_days = ctx.current_term.resolved_days
    candidate_days = ctx.candidate_term.resolved_days
    current_is_pack = ctx.current.payment_type == rules.PAYMENT_SESSION_PACK
    candidate_is_pack = ctx.candidate.payment_type == rules.PAYMENT_SESSION_PACK

    if candidate_days > current_days:
        return RuleMatch(
            kind=rules.UPGRADE,
            rule_id=rules.RULE_UPGRADE_LONGER_DURATION,
            reason=f"Same coverage but longer duration ({candidate_days} days vs {current_days} days)",
        )

    if (
        candidate_is_pack
        and not current_is_pack
        and ctx.candidate.duration_days
        and ctx.candidate.duration_days > current_days
    ):
        return RuleMatch(
            kind=rules.UPGRADE,
            rule_id=rules.RULE_UPGRADE_TO_SESSION_PACK,
            reason="Upgrade from subscription to session pack with longer validity",
        )

    # resolved_days of a session pack is its explicit duration or the pack fallback
    if current_is_pack and not candidate_is_pack and candidate_days > current_days:
        return RuleMatch(
            kind=rules.UPGRADE,
            rule_id=rules.RULE_UPGRADE_FROM_SESSION_PACK,
            reason="Upgrade from session pack to subscription with longer duration",
        )

    if candidate_days == current_days:
        return RuleMatch(
            kind=rules.RENEW,
            rule_id=rules.RULE_RENEW_SAME_TERMS,
            reason="Same coverage and duration - renewal",
        )

    return RuleMatch(
        kind=rules.BUY_ANOTHER,
        rule_id=rules.RULE_BUY_ANOTHER_SHORTER_DURATION,
        reason="Same coverage but shorter duration - not an upgrade",
    )


def _overlapping(ctx: ComparisonContext) -> Optional[RuleMatch]:
    return RuleMatch(
        kind=rules.BUY_ANOTHER,
        rule_id=rules.RULE_BUY_ANOTHER_OVERLAPPING,
        reason="Candidate has overlapping but different coverage",
    )


# Evaluated in order, first match wins. The last rule always matches.
RULES: tuple[Rule, ...] = (
    _broader_coverage,
    _not_included,
    _same_coverage_terms,
    _overlapping,
)


def _build_context(
    current: PlanDescriptor,
    candidate: PlanDescriptor,
    section_groups: Optional[SectionGroups],
    config: ClassificationConfig,
) -> ComparisonContext:
    return ComparisonContext(
        current=current,
        candidate=candidate,
        current_coverage=extract_coverage(current.included_groups, current.included_sections, current.package_type),
        candidate_coverage=extract_coverage(
            candidate.included_groups, candidate.included_sections, candidate.package_type
        ),
        current_term=resolve_term(current, config),
        candidate_term=resolve_term(candidate, config),
        section_groups=section_groups,
    )


def classify(
    current: PlanDescriptor,
    candidate: PlanDescriptor,
    current_end_date: Optional[str] = None,
    section_groups: Optional[SectionGroups] = None,
    config: Optional[ClassificationConfig] = None,
) -> ClassificationResult:
    """
    Classify purchasing `candidate` while `current` is active.

    Priority-ordered rules:
    1. Candidate coverage strictly broader => UPGRADE
    2. Candidate does not include current coverage => BUY_ANOTHER
    3. Equal coverage => UPGRADE on a longer term, RENEW on the same term,
       BUY_ANOTHER on a shorter term
    4. Else (overlapping but different coverage) => BUY_ANOTHER

    UPGRADE results carry `scheduled_start_date` (day after `current_end_date`)
    when an end date is given. A malformed end date raises DateParseError.
    """
    cfg = config or ClassificationConfig()
    ctx = _build_context(current, candidate, section_groups, cfg)

    match = next(m for m in (rule(ctx) for rule in RULES) if m is not None)

    scheduled_start_date = None
    if match.kind == rules.UPGRADE and current_end_date is not None:
        scheduled_start_date = next_start_date(current_end_date)

    metrics = {
        "current_package_type": current.package_type,
        "candidate_package_type": candidate.package_type,
        "current_duration_days": ctx.current_term.resolved_days,
        "candidate_duration_days": ctx.candidate_term.resolved_days,
        "duration_fallback_used": ctx.current_term.used_fallback or ctx.candidate_term.used_fallback,
        "section_catalog_used": bool(section_groups),
    }
    logger.debug(f"Applied {match.rule_id}: {match.kind} ({match.reason})")

    return ClassificationResult(
        kind=match.kind,
        reason=match.reason,
        rule_id=match.rule_id,
        scheduled_start_date=scheduled_start_date,
        metrics=metrics,
    )


def classify_candidates(
    current: PlanDescriptor,
    candidates: Iterable[PlanDescriptor],
    current_end_date: Optional[str] = None,
    section_groups: Optional[SectionGroups] = None,
    config: Optional[ClassificationConfig] = None,
) -> list[ClassificationResult]:
    """Classify each candidate tariff against one membership, preserving input order."""
    return [
        classify(current, candidate, current_end_date, section_groups=section_groups, config=config)
        for candidate in candidates
    ]
