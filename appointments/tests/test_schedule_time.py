import datetime

import pytest
from django.utils import timezone

from appointments.schedule_time import (
    combine_date_and_session_time,
    local_date,
    local_datetime,
    session_end_datetime,
)


def at(*args):
    return timezone.make_aware(datetime.datetime(*args))


def test_combine_overwrites_time_of_day():
    combined = combine_date_and_session_time(at(2024, 3, 1, 10, 17, 42, 5000), datetime.time(8, 30))
    assert combined == at(2024, 3, 1, 8, 30)


def test_combine_keeps_seconds_and_microseconds_of_session():
    combined = combine_date_and_session_time(at(2024, 3, 1, 10, 0), datetime.time(8, 30, 15, 250000))
    assert (combined.second, combined.microsecond) == (15, 250000)


def test_no_end_means_no_session_end():
    assert session_end_datetime(at(2024, 3, 1, 10, 0), datetime.time(8, 0), None) is None


def test_end_without_start_is_taken_as_is():
    end = session_end_datetime(at(2024, 3, 1, 10, 0), None, datetime.time(2, 0))
    assert end == at(2024, 3, 1, 2, 0)


def test_same_day_session():
    end = session_end_datetime(at(2024, 3, 1, 10, 0), datetime.time(8, 0), datetime.time(12, 0))
    assert end == at(2024, 3, 1, 12, 0)


@pytest.mark.parametrize('day', [
    datetime.date(2024, 2, 28),
    datetime.date(2024, 2, 29),
    datetime.date(2024, 12, 31),
    datetime.date(2025, 6, 15),
])
def test_overnight_session_ends_next_day_four_hours_later(day):
    reservation_at = local_datetime(day, datetime.time(23, 0))
    start = combine_date_and_session_time(reservation_at, datetime.time(22, 0))
    end = session_end_datetime(reservation_at, datetime.time(22, 0), datetime.time(2, 0))

    assert end - start == datetime.timedelta(hours=4)
    assert end.date() == day + datetime.timedelta(days=1)


def test_equal_start_and_end_spans_a_full_day():
    end = session_end_datetime(at(2024, 3, 1, 9, 0), datetime.time(9, 0), datetime.time(9, 0))
    assert end == at(2024, 3, 2, 9, 0)


def test_local_datetime_round_trips_calendar_date():
    moment = local_datetime(datetime.date(2024, 3, 1), datetime.time(0, 30))
    assert timezone.is_aware(moment)
    assert local_date(moment) == datetime.date(2024, 3, 1)


def test_combine_uses_clinic_calendar_date_for_utc_input():
    # 17:00 UTC on 1 March is 01:00 on 2 March in Asia/Makassar
    utc_moment = datetime.datetime(2024, 3, 1, 17, 0, tzinfo=datetime.timezone.utc)
    combined = combine_date_and_session_time(utc_moment, datetime.time(8, 0))
    assert combined == at(2024, 3, 2, 8, 0)
