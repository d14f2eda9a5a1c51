from __future__ import annotations

import logging
from typing import Optional, Sequence

from membership_engine.domain.classification.config import ClassificationConfig
from membership_engine.domain.classification.evaluator import classify
from membership_engine.domain.classification.model import ClassificationResult, PlanDescriptor
from membership_engine.ports.section_catalog import SectionCatalog

logger = logging.getLogger(__name__)


class ClassificationService:
    def __init__(
        self,
        section_catalog: SectionCatalog,
        config: Optional[ClassificationConfig] = None,
    ) -> None:
        self.section_catalog = section_catalog
        self.config = config or ClassificationConfig()

    def classify(
        self,
        current: PlanDescriptor,
        candidate: PlanDescriptor,
        current_end_date: Optional[str] = None,
    ) -> ClassificationResult:
        return self.classify_many(current, [candidate], current_end_date)[0]

    def classify_many(
        self,
        current: PlanDescriptor,
        candidates: Sequence[PlanDescriptor],
        current_end_date: Optional[str] = None,
    ) -> list[ClassificationResult]:
        """Classify candidates against `current`, reading the section catalog once."""
        section_groups = self.section_catalog.get_section_groups()

        results: list[ClassificationResult] = []
        for candidate in candidates:
            result = classify(
                current,
                candidate,
                current_end_date,
                section_groups=section_groups,
                config=self.config,
            )
            if result.metrics.get("duration_fallback_used"):
                logger.warning(
                    f"Duration fallback applied ({current.payment_type} -> {candidate.payment_type}); "
                    f"check plan data"
                )
            logger.info(
                f"Classified {current.package_type}/{current.payment_type} -> "
                f"{candidate.package_type}/{candidate.payment_type}: {result.kind} ({result.rule_id})"
            )
            results.append(result)
        return results
