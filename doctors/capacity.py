"""
Per (schedule, date) booking counters.

The counter is the queue-number source: `reserve_slot` returns the new
`current_reservations` as the queue number. Increments run under a row lock
and a conditional update, so two bookings for the same day never share a
number and the counter never passes `max_patients`.
"""
import datetime
import logging

from django.db import transaction
from django.db.models import F, IntegerField
from django.db.models.functions import Greatest
from django.utils import timezone

from appointments.exceptions import CapacityExceeded, ScheduleUnavailable
from .models import DailyScheduleStatus

logger = logging.getLogger(__name__)


def as_calendar_date(value):
    """Accept a date or an ISO `YYYY-MM-DD` string; aware datetimes are read in clinic time."""
    if isinstance(value, datetime.datetime):
        if timezone.is_aware(value):
            value = timezone.localtime(value)
        return value.date()
    if isinstance(value, datetime.date):
        return value
    return datetime.date.fromisoformat(str(value).strip())


def reserve_slot(schedule_id, date, max_patients):
    """Take the next queue number for the day or raise CapacityExceeded."""
    day = as_calendar_date(date)
    with transaction.atomic():
        status, created = DailyScheduleStatus.objects.select_for_update().get_or_create(
            schedule_id=schedule_id, date=day,
        )
        if not status.is_active:
            raise ScheduleUnavailable('The schedule is closed on %s' % day.isoformat())
        if status.current_reservations >= max_patients:
            raise CapacityExceeded(schedule_id, day, max_patients)

        updated = DailyScheduleStatus.objects.filter(
            pk=status.pk, current_reservations__lt=max_patients,
        ).update(current_reservations=F('current_reservations') + 1, updated_at=timezone.now())
        if not updated:
            raise CapacityExceeded(schedule_id, day, max_patients)

        status.refresh_from_db(fields=['current_reservations'])
        logger.debug('Reserved slot %s for schedule %s on %s', status.current_reservations, schedule_id, day)
        return status.current_reservations


def release_slot(schedule_id, date, count=1):
    """Give back `count` slots, never dropping below zero. Missing counters are ignored."""
    if count <= 0:
        return 0
    day = as_calendar_date(date)
    updated = DailyScheduleStatus.objects.filter(schedule_id=schedule_id, date=day).update(
        current_reservations=Greatest(F('current_reservations') - count, 0, output_field=IntegerField()),
        updated_at=timezone.now(),
    )
    if updated:
        logger.debug('Released %s slot(s) for schedule %s on %s', count, schedule_id, day)
    return updated


def set_day_active(schedule_id, date, is_active, notes=''):
    """Open or close bookings for one schedule on one date."""
    day = as_calendar_date(date)
    with transaction.atomic():
        status, _ = DailyScheduleStatus.objects.select_for_update().get_or_create(
            schedule_id=schedule_id, date=day,
        )
        status.is_active = is_active
        status.notes = notes
        status.save(update_fields=['is_active', 'notes', 'updated_at'])
    logger.info('Schedule %s on %s is now %s', schedule_id, day, 'open' if is_active else 'closed')
    return status
