from __future__ import annotations

from typing import Iterable, Optional

from membership_engine.domain.classification import rules
from membership_engine.domain.classification.model import AccessGrant, CoverageDescriptor
from membership_engine.domain.common.ids import GroupId, SectionGroups, SectionId


def extract_coverage(
    groups: Iterable[AccessGrant],
    sections: Iterable[AccessGrant],
    package_type: str,
) -> CoverageDescriptor:
    """
    Normalize raw access grants into a coverage descriptor.

    A full_club plan cannot enumerate every group and section, so its id sets are
    left empty and the comparators recognize it by package type instead.
    """
    if package_type == rules.PACKAGE_FULL_CLUB:
        return CoverageDescriptor(group_ids=frozenset(), section_ids=frozenset(), package_type=package_type)

    return CoverageDescriptor(
        group_ids=frozenset(GroupId(g.id) for g in groups),
        section_ids=frozenset(SectionId(s.id) for s in sections),
        package_type=package_type,
    )


def _is_full_club(coverage: CoverageDescriptor) -> bool:
    return coverage.package_type == rules.PACKAGE_FULL_CLUB


def _strictly_contains(outer: frozenset, inner: frozenset) -> bool:
    # Empty inner sets never count, two unrelated empty sets are not a superset
    return bool(inner) and inner < outer


def _groups_of_sections(
    section_ids: frozenset[SectionId], section_groups: Optional[SectionGroups]
) -> Optional[frozenset[GroupId]]:
    """Union of groups across the given sections, or None when the map cannot answer."""
    if not section_groups or not section_ids:
        return None
    if any(sid not in section_groups for sid in section_ids):
        return None
    groups: set[GroupId] = set()
    for sid in section_ids:
        groups.update(section_groups[sid])
    return frozenset(groups)


def is_strict_superset(
    base: CoverageDescriptor,
    other: CoverageDescriptor,
    section_groups: Optional[SectionGroups] = None,
) -> bool:
    """Does `other` grant strictly broader access than `base`?"""
    if _is_full_club(other):
        return not _is_full_club(base)
    if _is_full_club(base):
        return False

    if other.package_type == rules.PACKAGE_FULL_SECTION:
        if base.package_type in rules.GROUP_PACKAGES:
            section_group_ids = _groups_of_sections(other.section_ids, section_groups)
            if section_group_ids is not None and base.group_ids:
                return base.group_ids <= section_group_ids and len(section_group_ids) > len(base.group_ids)
            return bool(base.section_ids) and base.section_ids <= other.section_ids
        if base.package_type == rules.PACKAGE_FULL_SECTION:
            return _strictly_contains(other.section_ids, base.section_ids)

    if other.package_type == rules.PACKAGE_MULTIPLE_GROUPS:
        if base.package_type == rules.PACKAGE_SINGLE_GROUP:
            return (
                len(base.group_ids) == 1
                and base.group_ids <= other.group_ids
                and len(other.group_ids) > 1
            )
        if base.package_type == rules.PACKAGE_MULTIPLE_GROUPS:
            return _strictly_contains(other.group_ids, base.group_ids)

    return _strictly_contains(other.section_ids, base.section_ids) or _strictly_contains(
        other.group_ids, base.group_ids
    )


def includes_coverage(
    base: CoverageDescriptor,
    other: CoverageDescriptor,
    section_groups: Optional[SectionGroups] = None,
) -> bool:
    """Does `other` grant at least the access `base` grants (equal or broader)?"""
    if _is_full_club(other):
        return True
    if _is_full_club(base):
        return False

    if other.package_type == rules.PACKAGE_FULL_SECTION:
        section_group_ids = _groups_of_sections(other.section_ids, section_groups)
        if section_group_ids is not None and base.package_type in rules.GROUP_PACKAGES and base.group_ids:
            return base.group_ids <= section_group_ids
        if base.section_ids:
            return base.section_ids <= other.section_ids
        # Group-only grants: without the section map this is a best guess
        return bool(other.section_ids)

    if base.group_ids and base.group_ids <= other.group_ids:
        return True
    if base.section_ids and base.section_ids <= other.section_ids:
        return True
    return False


def are_equal(base: CoverageDescriptor, other: CoverageDescriptor) -> bool:
    if base.package_type != other.package_type:
        return False
    if _is_full_club(base):
        return True
    return base.group_ids == other.group_ids and base.section_ids == other.section_ids
