from __future__ import annotations

# Classification kinds
UPGRADE = "UPGRADE"
BUY_ANOTHER = "BUY_ANOTHER"
RENEW = "RENEW"
SAME = "SAME"  # reserved, no rule emits it

KINDS = (UPGRADE, BUY_ANOTHER, RENEW, SAME)

# Package types (coverage scope)
PACKAGE_SINGLE_GROUP = "single_group"
PACKAGE_MULTIPLE_GROUPS = "multiple_groups"
PACKAGE_FULL_SECTION = "full_section"
PACKAGE_FULL_CLUB = "full_club"

GROUP_PACKAGES = (PACKAGE_SINGLE_GROUP, PACKAGE_MULTIPLE_GROUPS)

# Payment types (billing cadence)
PAYMENT_MONTHLY = "monthly"
PAYMENT_SEMI_ANNUAL = "semi_annual"
PAYMENT_ANNUAL = "annual"
PAYMENT_SESSION_PACK = "session_pack"

# Rule IDs
RULE_UPGRADE_BROADER_COVERAGE = "membership_classification.upgrade_broader_coverage"
RULE_BUY_ANOTHER_NOT_INCLUDED = "membership_classification.buy_another_not_included"
RULE_UPGRADE_LONGER_DURATION = "membership_classification.upgrade_longer_duration"
RULE_UPGRADE_TO_SESSION_PACK = "membership_classification.upgrade_to_session_pack"
RULE_UPGRADE_FROM_SESSION_PACK = "membership_classification.upgrade_from_session_pack"
RULE_RENEW_SAME_TERMS = "membership_classification.renew_same_terms"
RULE_BUY_ANOTHER_SHORTER_DURATION = "membership_classification.buy_another_shorter_duration"
RULE_BUY_ANOTHER_OVERLAPPING = "membership_classification.buy_another_overlapping"
