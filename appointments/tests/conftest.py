import datetime

import pytest

from appointments.models import Reservation
from doctors.models import DailyScheduleStatus


@pytest.fixture
def make_reservation(schedule, patient, booking_day):
    """Insert a reservation row directly; counters are left to the caller."""
    def _make(queue_number, status=Reservation.STATUS_CONFIRMED, examination_status=Reservation.EXAM_WAITING,
              day=None, time=datetime.time(9, 0), **fields):
        fields.setdefault('schedule', schedule)
        fields.setdefault('doctor', fields['schedule'].doctor)
        fields.setdefault('patient', patient)
        return Reservation.objects.create(
            reservation_date=day or booking_day,
            reservation_time=time,
            queue_number=queue_number,
            status=status,
            examination_status=examination_status,
            **fields,
        )
    return _make


@pytest.fixture
def day_counter():
    def _counter(schedule, day):
        status = DailyScheduleStatus.objects.filter(schedule=schedule, date=day).first()
        return status.current_reservations if status else 0
    return _counter
