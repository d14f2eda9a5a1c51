from __future__ import annotations

from typing import Optional, Protocol

from membership_engine.domain.common.ids import SectionGroups


class SectionCatalog(Protocol):
    def get_section_groups(self) -> Optional[SectionGroups]: ...
