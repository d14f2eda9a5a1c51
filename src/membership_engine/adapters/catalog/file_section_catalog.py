"""Section catalog loaded from a JSON file."""

from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import Any, Optional

import jsonschema

from membership_engine.application.errors import SectionCatalogError
from membership_engine.domain.common.ids import GroupId, SectionGroups, SectionId
from membership_engine.ports.section_catalog import SectionCatalog

logger = logging.getLogger(__name__)

SECTION_CATALOG_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["sections"],
    "properties": {
        "sections": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["section_id", "group_ids"],
                "properties": {
                    "section_id": {"type": "integer"},
                    "name": {"type": "string"},
                    "group_ids": {"type": "array", "items": {"type": "integer"}},
                },
            },
        },
    },
}


def validate_catalog_data(data: Any) -> None:
    """Validate parsed catalog JSON against SECTION_CATALOG_SCHEMA."""
    try:
        jsonschema.validate(instance=data, schema=SECTION_CATALOG_SCHEMA)
    except jsonschema.ValidationError as e:
        raise SectionCatalogError(f"Section catalog validation failed: {e.message}") from e


def parse_catalog_data(data: Any) -> dict[SectionId, frozenset[GroupId]]:
    validate_catalog_data(data)
    sections: dict[SectionId, set[GroupId]] = {}
    for entry in data["sections"]:
        # Repeated section entries are merged
        sections.setdefault(SectionId(entry["section_id"]), set()).update(
            GroupId(gid) for gid in entry["group_ids"]
        )
    return {sid: frozenset(gids) for sid, gids in sections.items()}


class FileSectionCatalog(SectionCatalog):
    """Reads a section -> groups map from disk and caches it for a short TTL."""

    CACHE_TTL_SECONDS = 60

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._cache: Optional[tuple[float, dict[SectionId, frozenset[GroupId]]]] = None

    def _load(self) -> dict[SectionId, frozenset[GroupId]]:
        if not self.path.exists():
            raise SectionCatalogError(f"Section catalog not found: {self.path}", source=str(self.path))

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise SectionCatalogError(f"Invalid JSON in section catalog: {e}", source=str(self.path)) from e

        try:
            sections = parse_catalog_data(data)
        except SectionCatalogError as e:
            raise SectionCatalogError(str(e), source=str(self.path)) from e

        logger.info(f"Loaded section catalog from {self.path} ({len(sections)} section(s))")
        return sections

    def get_section_groups(self) -> Optional[SectionGroups]:
        now = time.time()
        if self._cache is not None:
            cached_time, cached_sections = self._cache
            if now - cached_time < self.CACHE_TTL_SECONDS:
                return cached_sections

        sections = self._load()
        self._cache = (now, sections)
        return sections

    def clear_cache(self) -> None:
        self._cache = None
