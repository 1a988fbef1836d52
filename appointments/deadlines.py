"""
No-show deadline and check-in window.

Pure functions: they take the reservation moment, the session's times of day
and policy minutes, and never raise.
"""
import datetime
from collections import namedtuple

from clinic_settings.policy import (
    DEFAULT_AUTO_CANCEL_GRACE_MINUTES,
    DEFAULT_CHECK_IN_EARLY_MINUTES,
    DEFAULT_CHECK_IN_LATE_MINUTES,
    clamp_minutes,
)
from .schedule_time import local_datetime, session_end_datetime


class CheckInWindow(namedtuple('CheckInWindow', ['starts_at', 'ends_at'])):
    __slots__ = ()

    def contains(self, moment):
        return self.starts_at <= moment <= self.ends_at

    def as_dict(self):
        return {'starts_at': self.starts_at.isoformat(), 'ends_at': self.ends_at.isoformat()}


def no_show_deadline(reservation_at, session_start, session_end,
                     check_in_late_minutes, auto_cancel_grace_minutes):
    """
    The earlier of (reservation + late minutes) and (session end + grace).
    Without a session end only the personal late deadline applies.
    """
    late = clamp_minutes(check_in_late_minutes, DEFAULT_CHECK_IN_LATE_MINUTES)
    grace = clamp_minutes(auto_cancel_grace_minutes, DEFAULT_AUTO_CANCEL_GRACE_MINUTES)

    late_deadline = reservation_at + datetime.timedelta(minutes=late)
    session_end_at = session_end_datetime(reservation_at, session_start, session_end)
    if session_end_at is None:
        return late_deadline

    grace_deadline = session_end_at + datetime.timedelta(minutes=grace)
    return min(late_deadline, grace_deadline)


def check_in_window(reservation_at, session_start, session_end, policy):
    early = clamp_minutes(policy.check_in_early_minutes, DEFAULT_CHECK_IN_EARLY_MINUTES)
    return CheckInWindow(
        starts_at=reservation_at - datetime.timedelta(minutes=early),
        ends_at=no_show_deadline(
            reservation_at, session_start, session_end,
            policy.check_in_late_minutes, policy.auto_cancel_grace_minutes,
        ),
    )


def _reservation_times(reservation):
    session = reservation.schedule.session
    reservation_at = local_datetime(reservation.reservation_date, reservation.reservation_time)
    if session is None:
        return reservation_at, None, None
    return reservation_at, session.start_time, session.end_time


def reservation_deadline(reservation, policy):
    reservation_at, start, end = _reservation_times(reservation)
    return no_show_deadline(
        reservation_at, start, end, policy.check_in_late_minutes, policy.auto_cancel_grace_minutes,
    )


def reservation_check_in_window(reservation, policy):
    reservation_at, start, end = _reservation_times(reservation)
    return check_in_window(reservation_at, start, end, policy)
