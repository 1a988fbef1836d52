"""
No-show sweep.

Cancels open, not-yet-checked-in reservations whose no-show deadline has
passed and hands their slots back to the daily counters. The whole run is
one transaction, and the candidate query skips anything already cancelled,
so a failed run can simply be retried.
"""
import logging
from collections import Counter

from django.db import transaction
from django.utils import timezone

from clinic_settings.services import load_policy
from doctors.capacity import release_slot
from .deadlines import reservation_deadline
from .models import Reservation
from .schedule_time import local_date, local_datetime

logger = logging.getLogger(__name__)
audit_logger = logging.getLogger('queue_audit_logger')


def run_auto_cancel_sweep(policy=None, now=None):
    policy = policy or load_policy()
    if not policy.enable_auto_cancel:
        logger.info('Auto-cancel is disabled; sweep skipped')
        return {'skipped': True}

    now = now or timezone.now()
    today = local_date(now)

    with transaction.atomic():
        candidates = (
            Reservation.objects
            .select_for_update(of=('self',))
            .select_related('schedule__session')
            .filter(
                status__in=Reservation.OPEN_STATUSES,
                examination_status=Reservation.EXAM_NOT_STARTED,
                reservation_date__lte=today,
            )
            .order_by('id')
        )

        processed = 0
        overdue = []
        for reservation in candidates:
            if local_datetime(reservation.reservation_date, reservation.reservation_time) > now:
                continue
            processed += 1
            if now > reservation_deadline(reservation, policy):
                overdue.append(reservation)

        cancelled_ids = [reservation.pk for reservation in overdue]
        if cancelled_ids:
            Reservation.objects.filter(pk__in=cancelled_ids).update(
                status=Reservation.STATUS_CANCELLED,
                examination_status=Reservation.EXAM_CANCELLED,
                cancellation_reason=Reservation.REASON_NO_SHOW,
                updated_at=now,
            )
            released = Counter((r.schedule_id, r.reservation_date) for r in overdue)
            for (schedule_id, day), count in released.items():
                release_slot(schedule_id, day, count)

    if cancelled_ids:
        audit_logger.info('No-show sweep cancelled %s of %s reservation(s): %s',
                          len(cancelled_ids), processed, cancelled_ids)
    else:
        logger.info('No-show sweep checked %s reservation(s); nothing overdue', processed)

    return {
        'skipped': False,
        'processed': processed,
        'cancelled': len(cancelled_ids),
        'cancelled_ids': cancelled_ids,
    }
