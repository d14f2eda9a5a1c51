from __future__ import annotations

from typing import Iterable, Mapping, Optional

from membership_engine.domain.common.ids import GroupId, SectionGroups, SectionId
from membership_engine.ports.section_catalog import SectionCatalog


class InMemorySectionCatalog(SectionCatalog):
    """Serves a section -> groups map held in memory, or nothing at all."""

    def __init__(self, sections: Optional[Mapping[int, Iterable[int]]] = None) -> None:
        self.sections: Optional[dict[SectionId, frozenset[GroupId]]] = None
        if sections is not None:
            self.sections = {
                SectionId(int(sid)): frozenset(GroupId(int(gid)) for gid in gids)
                for sid, gids in sections.items()
            }

    def get_section_groups(self) -> Optional[SectionGroups]:
        return self.sections
