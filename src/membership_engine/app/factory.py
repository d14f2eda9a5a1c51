from __future__ import annotations

from typing import Optional

from membership_engine.adapters.catalog.file_section_catalog import FileSectionCatalog
from membership_engine.adapters.catalog.in_memory_section_catalog import InMemorySectionCatalog
from membership_engine.application.classification_service import ClassificationService
from membership_engine.domain.classification.config import ClassificationConfig
from membership_engine.ports.section_catalog import SectionCatalog
from membership_engine.settings import Settings, get_settings


def create_section_catalog(settings: Settings, catalog_path: Optional[str] = None) -> SectionCatalog:
    path = catalog_path or settings.section_catalog_path
    if path:
        return FileSectionCatalog(path)
    return InMemorySectionCatalog()


def create_classification_service(
    settings: Optional[Settings] = None, catalog_path: Optional[str] = None
) -> ClassificationService:
    settings = settings or get_settings()
    config = ClassificationConfig(
        session_pack_fallback_days=settings.fallback_duration_days,
        fallback_duration_days=settings.fallback_duration_days,
    )
    return ClassificationService(
        section_catalog=create_section_catalog(settings, catalog_path),
        config=config,
    )
