"""
Date + time-of-day arithmetic for reservations and practice sessions.

Reservations store a calendar date and a time of day separately;
`local_datetime` is the one place they become an absolute moment, always in
the clinic time zone.
"""
import datetime

from django.utils import timezone

ONE_DAY = datetime.timedelta(days=1)


def local_datetime(date, time):
    """Aware datetime for `date` at `time` in the clinic time zone."""
    return timezone.make_aware(datetime.datetime.combine(date, time))


def local_date(moment):
    """Clinic calendar date of an aware moment."""
    return timezone.localdate(moment)


def _local(moment):
    if timezone.is_aware(moment):
        return timezone.localtime(moment)
    return moment


def combine_date_and_session_time(reservation_at, session_time):
    """Calendar date of `reservation_at` with the hour..microsecond of `session_time`."""
    return _local(reservation_at).replace(
        hour=session_time.hour,
        minute=session_time.minute,
        second=session_time.second,
        microsecond=session_time.microsecond,
    )


def session_end_datetime(reservation_at, session_start=None, session_end=None):
    """
    End of the session on the reservation's day, or None without an end time.
    An end that is not after the start belongs to the next day (22:00-02:00).
    """
    if session_end is None:
        return None

    end_at = combine_date_and_session_time(reservation_at, session_end)
    if session_start is None:
        return end_at

    start_at = combine_date_and_session_time(reservation_at, session_start)
    if end_at <= start_at:
        end_at = end_at + ONE_DAY
    return end_at
