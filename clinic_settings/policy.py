"""
Queue policy value object and its normalizer.

Policy input comes from an admin form or a stored settings row and may be
partial, mistyped or out of range. `normalize_policy` never rejects it: every
field falls back to its default or is clamped, so a bad form can't break
booking.
"""
import math
from collections.abc import Mapping
from dataclasses import dataclass

MIN_POLICY_MINUTES = 0
MAX_POLICY_MINUTES = 24 * 60

DEFAULT_CHECK_IN_EARLY_MINUTES = 120
DEFAULT_CHECK_IN_LATE_MINUTES = 60
DEFAULT_AUTO_CANCEL_GRACE_MINUTES = 30

POLICY_FIELDS = (
    'enable_strict_check_in',
    'check_in_early_minutes',
    'check_in_late_minutes',
    'enable_auto_cancel',
    'auto_cancel_grace_minutes',
)


@dataclass(frozen=True)
class QueuePolicy:
    enable_strict_check_in: bool = False
    check_in_early_minutes: int = DEFAULT_CHECK_IN_EARLY_MINUTES
    check_in_late_minutes: int = DEFAULT_CHECK_IN_LATE_MINUTES
    enable_auto_cancel: bool = False
    auto_cancel_grace_minutes: int = DEFAULT_AUTO_CANCEL_GRACE_MINUTES

    def as_dict(self):
        return {name: getattr(self, name) for name in POLICY_FIELDS}


DEFAULT_QUEUE_POLICY = QueuePolicy()


def clamp_minutes(value, fallback):
    """Coerce `value` to whole minutes in [0, 1440], or return `fallback`."""
    if isinstance(value, bool):
        value = int(value)
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return fallback
    if not math.isfinite(number):
        return fallback
    # half-up, matching the admin form's rounding
    rounded = math.floor(number + 0.5)
    return min(MAX_POLICY_MINUTES, max(MIN_POLICY_MINUTES, rounded))


def _read(raw, name):
    if raw is None:
        return None
    if isinstance(raw, Mapping):
        return raw.get(name)
    return getattr(raw, name, None)


def _flag(value, fallback):
    return value if isinstance(value, bool) else fallback


def normalize_policy(raw=None):
    """
    Build a complete QueuePolicy from untrusted input.

    `raw` can be None, a mapping, or any object exposing the policy fields as
    attributes (a ClinicSettings row, another QueuePolicy).
    """
    default = DEFAULT_QUEUE_POLICY
    return QueuePolicy(
        enable_strict_check_in=_flag(_read(raw, 'enable_strict_check_in'), default.enable_strict_check_in),
        check_in_early_minutes=clamp_minutes(_read(raw, 'check_in_early_minutes'), default.check_in_early_minutes),
        check_in_late_minutes=clamp_minutes(_read(raw, 'check_in_late_minutes'), default.check_in_late_minutes),
        enable_auto_cancel=_flag(_read(raw, 'enable_auto_cancel'), default.enable_auto_cancel),
        auto_cancel_grace_minutes=clamp_minutes(_read(raw, 'auto_cancel_grace_minutes'), default.auto_cancel_grace_minutes),
    )
