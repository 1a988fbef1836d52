import math
from decimal import Decimal
from types import SimpleNamespace

import pytest

from clinic_settings.policy import (
    DEFAULT_QUEUE_POLICY,
    MAX_POLICY_MINUTES,
    POLICY_FIELDS,
    QueuePolicy,
    clamp_minutes,
    normalize_policy,
)


def test_none_gives_defaults():
    policy = normalize_policy(None)
    assert policy == DEFAULT_QUEUE_POLICY
    assert policy.as_dict() == {
        'enable_strict_check_in': False,
        'check_in_early_minutes': 120,
        'check_in_late_minutes': 60,
        'enable_auto_cancel': False,
        'auto_cancel_grace_minutes': 30,
    }


def test_partial_mapping_keeps_given_fields():
    policy = normalize_policy({'enable_auto_cancel': True, 'check_in_late_minutes': 15})
    assert policy.enable_auto_cancel is True
    assert policy.check_in_late_minutes == 15
    assert policy.check_in_early_minutes == 120
    assert policy.enable_strict_check_in is False


@pytest.mark.parametrize('value', ['true', 1, 'yes', None, [], {}])
def test_non_bool_flags_fall_back(value):
    policy = normalize_policy({'enable_strict_check_in': value, 'enable_auto_cancel': value})
    assert policy.enable_strict_check_in is False
    assert policy.enable_auto_cancel is False


@pytest.mark.parametrize('value, expected', [
    ('45', 45),
    (44.5, 45),
    (44.4, 44),
    (Decimal('10.6'), 11),
    (-30, 0),
    (5000, MAX_POLICY_MINUTES),
    (1440, 1440),
    (0, 0),
    (True, 1),
])
def test_minutes_rounded_and_clamped(value, expected):
    assert clamp_minutes(value, 60) == expected


@pytest.mark.parametrize('value', [None, 'abc', '', float('nan'), float('inf'), -math.inf, object(), 10 ** 400])
def test_unusable_minutes_use_default(value):
    assert clamp_minutes(value, 60) == 60


def test_garbage_everywhere_still_valid():
    raw = {
        'enable_strict_check_in': 'on',
        'check_in_early_minutes': 'lots',
        'check_in_late_minutes': float('nan'),
        'enable_auto_cancel': 0,
        'auto_cancel_grace_minutes': -1e9,
    }
    policy = normalize_policy(raw)
    for name in POLICY_FIELDS:
        assert getattr(policy, name) is not None
    assert policy.check_in_early_minutes == 120
    assert policy.check_in_late_minutes == 60
    assert policy.auto_cancel_grace_minutes == 0


def test_idempotent_on_own_output():
    once = normalize_policy({'check_in_early_minutes': 9999.7, 'enable_strict_check_in': True})
    assert normalize_policy(once) == once
    assert normalize_policy(once.as_dict()) == once


def test_reads_attribute_objects():
    row = SimpleNamespace(enable_strict_check_in=True, check_in_early_minutes=30,
                          check_in_late_minutes=10, enable_auto_cancel=True, auto_cancel_grace_minutes=5)
    assert normalize_policy(row) == QueuePolicy(True, 30, 10, True, 5)


def test_policy_is_immutable():
    with pytest.raises(AttributeError):
        DEFAULT_QUEUE_POLICY.check_in_late_minutes = 5
