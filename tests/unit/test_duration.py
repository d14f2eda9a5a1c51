import logging

import pytest

from membership_engine.domain.classification.config import ClassificationConfig
from membership_engine.domain.classification.duration import resolve_duration_days, resolve_term
from membership_engine.domain.classification.model import PlanDescriptor
from membership_engine.domain.classification import rules

DURATION_LOGGER = "membership_engine.domain.classification.duration"


@pytest.mark.parametrize(
    "payment_type,expected",
    [
        (rules.PAYMENT_ANNUAL, 365),
        (rules.PAYMENT_SEMI_ANNUAL, 180),
        (rules.PAYMENT_MONTHLY, 30),
    ],
)
def test_cadence_durations(payment_type, expected):
    assert resolve_duration_days(payment_type, None) == expected


def test_explicit_duration_always_wins():
    assert resolve_duration_days(rules.PAYMENT_ANNUAL, 100) == 100
    assert resolve_duration_days(rules.PAYMENT_SESSION_PACK, 45) == 45
    assert resolve_duration_days("weekly", 7) == 7


def test_session_pack_without_duration_falls_back_with_warning(caplog):
    with caplog.at_level(logging.WARNING, logger=DURATION_LOGGER):
        assert resolve_duration_days(rules.PAYMENT_SESSION_PACK, None) == 30
    assert any("session_pack" in r.getMessage() for r in caplog.records)


def test_unrecognized_payment_type_falls_back_with_distinct_warning(caplog):
    with caplog.at_level(logging.WARNING, logger=DURATION_LOGGER):
        assert resolve_duration_days("weekly", None) == 30
    messages = [r.getMessage() for r in caplog.records]
    assert any("Unrecognized payment_type 'weekly'" in m for m in messages)


def test_monthly_does_not_warn(caplog):
    with caplog.at_level(logging.WARNING, logger=DURATION_LOGGER):
        resolve_duration_days(rules.PAYMENT_MONTHLY, None)
    assert not caplog.records


def test_config_overrides_term_table():
    cfg = ClassificationConfig(
        term_days={rules.PAYMENT_ANNUAL: 360, rules.PAYMENT_MONTHLY: 28},
        fallback_duration_days=14,
    )
    assert resolve_duration_days(rules.PAYMENT_ANNUAL, None, cfg) == 360
    assert resolve_duration_days(rules.PAYMENT_MONTHLY, None, cfg) == 28
    # semi_annual dropped from the table, so it is now unrecognized
    assert resolve_duration_days(rules.PAYMENT_SEMI_ANNUAL, None, cfg) == 14


def test_resolve_term_flags_fallback():
    pack = PlanDescriptor.new(rules.PACKAGE_SINGLE_GROUP, rules.PAYMENT_SESSION_PACK, price=5000.0)
    term = resolve_term(pack)
    assert term.resolved_days == 30
    assert term.used_fallback is True
    assert term.explicit_duration_days is None
    assert term.price == 5000.0

    monthly = PlanDescriptor.new(rules.PACKAGE_SINGLE_GROUP, rules.PAYMENT_MONTHLY)
    assert resolve_term(monthly).used_fallback is False
