from __future__ import annotations

from typing import Mapping, NewType

GroupId = NewType("GroupId", int)
SectionId = NewType("SectionId", int)

# Authoritative section -> groups membership, when a caller has it
SectionGroups = Mapping[SectionId, frozenset[GroupId]]
