"""
Reservation lifecycle: booking, walk-in, check-in, examination status,
priority promotion, cancellation and rescheduling.

Every write runs in one transaction and locks the rows it changes. Queue
numbers come from the per-day counter in `doctors.capacity`.
"""
import logging
from itertools import groupby

from django.db import transaction
from django.db.models import F
from django.utils import timezone

from clinic_settings.services import load_policy
from doctors.capacity import as_calendar_date, release_slot, reserve_slot
from doctors.models import DoctorSchedule
from .deadlines import reservation_check_in_window
from .exceptions import (
    CheckInWindowViolation,
    InvalidTransition,
    QueueError,
    ReservationNotFound,
    ScheduleNotFound,
    ScheduleUnavailable,
)
from .models import Reservation
from .schedule_time import local_date

logger = logging.getLogger(__name__)
audit_logger = logging.getLogger('queue_audit_logger')

DEFAULT_PRIORITY_REASON = 'Emergency case'

EXAMINATION_TARGETS = (
    Reservation.EXAM_WAITING,
    Reservation.EXAM_IN_PROGRESS,
    Reservation.EXAM_WAITING_FOR_PAYMENT,
    Reservation.EXAM_COMPLETED,
    Reservation.EXAM_CANCELLED,
)

QUEUE_ORDER = (F('queue_number').asc(nulls_last=True), 'id')


def _get_schedule(schedule_id):
    try:
        return DoctorSchedule.objects.select_related('doctor', 'session').get(pk=schedule_id)
    except DoctorSchedule.DoesNotExist:
        raise ScheduleNotFound()


def _check_bookable(schedule, day):
    if not schedule.is_active or not schedule.doctor.is_active:
        raise ScheduleUnavailable('This schedule is not active')
    if not schedule.runs_on(day):
        raise ScheduleUnavailable(
            'This schedule runs on %s, not on %s' % (schedule.get_day_of_week_display(), day.isoformat()),
        )


def _default_time(schedule, reservation_time):
    if reservation_time is not None:
        return reservation_time
    if schedule.session is not None:
        return schedule.session.start_time
    raise QueueError('A reservation time is required for schedules without a session', error_code='time_required')


def _lock_reservation(reservation_id):
    try:
        return Reservation.objects.select_for_update().get(pk=reservation_id)
    except Reservation.DoesNotExist:
        raise ReservationNotFound()


def _clean_reason(reason):
    if isinstance(reason, str):
        reason = reason.strip()
    return reason or None


def book_reservation(patient, schedule_id, reservation_date, reservation_time=None, complaint=''):
    """Pending reservation with the next queue number of that day."""
    day = as_calendar_date(reservation_date)
    with transaction.atomic():
        schedule = _get_schedule(schedule_id)
        _check_bookable(schedule, day)
        time_of_day = _default_time(schedule, reservation_time)

        queue_number = reserve_slot(schedule.pk, day, schedule.max_patients)
        reservation = Reservation.objects.create(
            patient=patient,
            doctor=schedule.doctor,
            schedule=schedule,
            reservation_date=day,
            reservation_time=time_of_day,
            queue_number=queue_number,
            status=Reservation.STATUS_PENDING,
            examination_status=Reservation.EXAM_NOT_STARTED,
            complaint=(complaint or '').strip(),
        )
    audit_logger.info('Booked reservation %s: patient=%s schedule=%s date=%s queue=%s',
                      reservation.pk, patient.pk, schedule.pk, day, queue_number)
    return reservation


def register_walk_in(patient, schedule_id, complaint='', now=None):
    """Walk-in for today: confirmed and already waiting in the queue."""
    now = now or timezone.now()
    today = local_date(now)
    with transaction.atomic():
        schedule = _get_schedule(schedule_id)
        _check_bookable(schedule, today)

        queue_number = reserve_slot(schedule.pk, today, schedule.max_patients)
        reservation = Reservation.objects.create(
            patient=patient,
            doctor=schedule.doctor,
            schedule=schedule,
            reservation_date=today,
            reservation_time=timezone.localtime(now).time().replace(microsecond=0),
            queue_number=queue_number,
            status=Reservation.STATUS_CONFIRMED,
            examination_status=Reservation.EXAM_WAITING,
            complaint=(complaint or '').strip(),
            is_walk_in=True,
            checked_in_at=now,
        )
    audit_logger.info('Walk-in reservation %s: patient=%s schedule=%s queue=%s',
                      reservation.pk, patient.pk, schedule.pk, queue_number)
    return reservation


def check_in(reservation_id, policy=None, now=None):
    """
    Put a booked patient into the waiting queue. With strict check-in the
    moment has to fall inside the reservation's check-in window.
    """
    policy = policy or load_policy()
    now = now or timezone.now()
    with transaction.atomic():
        reservation = _lock_reservation(reservation_id)
        if not reservation.is_open:
            raise InvalidTransition(
                'A %s reservation cannot be checked in' % reservation.get_status_display().lower(),
                error_code='not_checkable',
            )
        if reservation.examination_status != Reservation.EXAM_NOT_STARTED:
            raise InvalidTransition('The patient has already checked in', error_code='already_checked_in')

        if policy.enable_strict_check_in:
            window = reservation_check_in_window(reservation, policy)
            if now < window.starts_at:
                raise CheckInWindowViolation(True, window)
            if now > window.ends_at:
                raise CheckInWindowViolation(False, window)

        reservation.status = Reservation.STATUS_CONFIRMED
        reservation.examination_status = Reservation.EXAM_WAITING
        reservation.cancellation_reason = None
        reservation.checked_in_at = now
        reservation.save(update_fields=['status', 'examination_status', 'cancellation_reason',
                                        'checked_in_at', 'updated_at'])
    audit_logger.info('Checked in reservation %s (queue %s)', reservation.pk, reservation.queue_number)
    return reservation


def update_examination_status(reservation_id, examination_status):
    """Move a reservation through the examination flow; the booking status follows."""
    if examination_status not in EXAMINATION_TARGETS:
        raise InvalidTransition('Unknown examination status: %s' % examination_status, error_code='invalid_status')

    with transaction.atomic():
        reservation = _lock_reservation(reservation_id)
        if not reservation.is_open:
            raise InvalidTransition('The reservation is already closed', error_code='reservation_closed')

        reservation.examination_status = examination_status
        if examination_status == Reservation.EXAM_COMPLETED:
            reservation.status = Reservation.STATUS_COMPLETED
        elif examination_status == Reservation.EXAM_CANCELLED:
            reservation.status = Reservation.STATUS_CANCELLED
            reservation.cancellation_reason = Reservation.REASON_STAFF
            release_slot(reservation.schedule_id, reservation.reservation_date)
        else:
            reservation.status = Reservation.STATUS_CONFIRMED
        reservation.save(update_fields=['status', 'examination_status', 'cancellation_reason', 'updated_at'])
    audit_logger.info('Reservation %s examination status -> %s', reservation.pk, examination_status)
    return reservation


def promote_to_priority(reservation_id, reason=None):
    """
    Move a waiting reservation to the front of its doctor's queue for that day.
    The rest of the waiting set is renumbered 2..n in its current order, all
    in one batch write.
    """
    with transaction.atomic():
        target = _lock_reservation(reservation_id)
        if target.is_priority:
            raise InvalidTransition('The reservation is already a priority case', error_code='already_priority')
        if target.status != Reservation.STATUS_CONFIRMED or target.examination_status != Reservation.EXAM_WAITING:
            raise InvalidTransition('Only patients waiting in the queue can be prioritised', error_code='not_waiting')

        others = list(
            Reservation.objects.select_for_update()
            .filter(
                doctor_id=target.doctor_id,
                reservation_date=target.reservation_date,
                status=Reservation.STATUS_CONFIRMED,
                examination_status=Reservation.EXAM_WAITING,
            )
            .exclude(pk=target.pk)
            .order_by(*QUEUE_ORDER)
        )

        now = timezone.now()
        target.queue_number = 1
        target.is_priority = True
        target.priority_reason = _clean_reason(reason) or DEFAULT_PRIORITY_REASON
        target.updated_at = now
        for position, reservation in enumerate(others, start=2):
            reservation.queue_number = position
            reservation.updated_at = now

        Reservation.objects.bulk_update([target] + others, ['queue_number', 'is_priority', 'priority_reason', 'updated_at'])

    audit_logger.info('Promoted reservation %s to priority (%s); %s reservation(s) shifted',
                      target.pk, target.priority_reason, len(others))
    return {
        'reservation_id': target.pk,
        'is_priority': True,
        'new_queue_number': 1,
    }


def update_priority(reservation_id, is_priority, reason=None):
    """
    Turning priority on for a regular reservation promotes it. Anything else
    (turning it off, editing the reason) only touches this reservation.
    """
    if is_priority:
        current = Reservation.objects.filter(pk=reservation_id).values_list('is_priority', flat=True).first()
        if current is None:
            raise ReservationNotFound()
        if not current:
            return promote_to_priority(reservation_id, reason)

    with transaction.atomic():
        reservation = _lock_reservation(reservation_id)
        reservation.is_priority = bool(is_priority)
        reservation.priority_reason = _clean_reason(reason) if is_priority else None
        reservation.save(update_fields=['is_priority', 'priority_reason', 'updated_at'])
    audit_logger.info('Reservation %s priority set to %s', reservation.pk, reservation.is_priority)
    return {
        'reservation_id': reservation.pk,
        'is_priority': reservation.is_priority,
        'new_queue_number': reservation.queue_number,
    }


def cancel_reservation(reservation_id, reason=Reservation.REASON_PATIENT_REQUEST):
    with transaction.atomic():
        reservation = _lock_reservation(reservation_id)
        if not reservation.is_open:
            raise InvalidTransition(
                'A %s reservation cannot be cancelled' % reservation.get_status_display().lower(),
                error_code='not_cancellable',
            )
        reservation.status = Reservation.STATUS_CANCELLED
        reservation.examination_status = Reservation.EXAM_CANCELLED
        reservation.cancellation_reason = reason
        reservation.save(update_fields=['status', 'examination_status', 'cancellation_reason', 'updated_at'])
        release_slot(reservation.schedule_id, reservation.reservation_date)
    audit_logger.info('Cancelled reservation %s (%s)', reservation.pk, reason)
    return reservation


def reschedule_reservation(reservation_id, schedule_id, reservation_date, reservation_time=None):
    """
    Move an open reservation to another schedule/date. The old slot is given
    back and a new queue number taken; a full target day rolls back both.
    Staying on the same schedule and date keeps the queue number.
    """
    day = as_calendar_date(reservation_date)
    with transaction.atomic():
        reservation = _lock_reservation(reservation_id)
        if not reservation.is_open:
            raise InvalidTransition(
                'A %s reservation cannot be rescheduled' % reservation.get_status_display().lower(),
                error_code='not_reschedulable',
            )
        schedule = _get_schedule(schedule_id)
        _check_bookable(schedule, day)
        time_of_day = _default_time(schedule, reservation_time)

        old_schedule_id, old_date = reservation.schedule_id, reservation.reservation_date
        if schedule.pk == old_schedule_id and day == old_date:
            queue_number = reservation.queue_number
        else:
            release_slot(old_schedule_id, old_date)
            queue_number = reserve_slot(schedule.pk, day, schedule.max_patients)

        reservation.schedule = schedule
        reservation.doctor = schedule.doctor
        reservation.reservation_date = day
        reservation.reservation_time = time_of_day
        reservation.queue_number = queue_number
        reservation.status = Reservation.STATUS_PENDING
        reservation.examination_status = Reservation.EXAM_NOT_STARTED
        reservation.is_priority = False
        reservation.priority_reason = None
        reservation.checked_in_at = None
        reservation.save()
    audit_logger.info('Rescheduled reservation %s: schedule %s/%s -> %s/%s queue=%s',
                      reservation.pk, old_schedule_id, old_date, schedule.pk, day, queue_number)
    return reservation


def queue_for_date(day):
    """Patients waiting or being examined on `day`, grouped per doctor in queue order."""
    day = as_calendar_date(day)
    reservations = (
        Reservation.objects
        .filter(
            reservation_date=day,
            status=Reservation.STATUS_CONFIRMED,
            examination_status__in=[Reservation.EXAM_WAITING, Reservation.EXAM_IN_PROGRESS],
        )
        .select_related('doctor', 'patient', 'schedule__session')
        .order_by('doctor__name', 'doctor_id', *QUEUE_ORDER)
    )
    return [
        {'doctor': doctor, 'reservations': list(items)}
        for doctor, items in groupby(reservations, key=lambda r: r.doctor)
    ]


def emergency_cases(today=None):
    """Priority reservations from today on, most recently changed first."""
    today = as_calendar_date(today) if today is not None else timezone.localdate()
    return (
        Reservation.objects
        .filter(is_priority=True, reservation_date__gte=today)
        .select_related('doctor', 'patient', 'schedule__session')
        .order_by('-updated_at')
    )
