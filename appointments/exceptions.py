"""
Queue errors. Each carries the envelope code and a machine readable
`error_code` so clients can tell "day full" from "already checked in".
"""


class QueueError(Exception):
    status_code = 400
    error_code = 'queue_error'
    default_message = 'Queue operation failed'

    def __init__(self, message=None, error_code=None, **extra):
        self.message = message or self.default_message
        if error_code:
            self.error_code = error_code
        self.extra = extra
        super().__init__(self.message)

    def as_data(self):
        data = {'error': self.error_code}
        data.update(self.extra)
        return data


class CapacityExceeded(QueueError):
    status_code = 409
    error_code = 'day_full'
    default_message = 'This schedule is fully booked for the selected date'

    def __init__(self, schedule_id=None, date=None, max_patients=None, message=None):
        super().__init__(message, max_patients=max_patients)
        self.schedule_id = schedule_id
        self.date = date


class ScheduleUnavailable(QueueError):
    status_code = 400
    error_code = 'schedule_unavailable'
    default_message = 'The schedule is not available on this date'


class ReservationNotFound(QueueError):
    status_code = 404
    error_code = 'not_found'
    default_message = 'Reservation not found'


class ScheduleNotFound(QueueError):
    status_code = 404
    error_code = 'not_found'
    default_message = 'Schedule not found'


class InvalidTransition(QueueError):
    status_code = 409
    error_code = 'invalid_transition'
    default_message = 'The reservation cannot change to the requested state'


class CheckInWindowViolation(QueueError):
    status_code = 400

    def __init__(self, too_early, window):
        message = 'Check-in is not open yet' if too_early else 'The check-in window has closed'
        super().__init__(
            message,
            error_code='check_in_too_early' if too_early else 'check_in_too_late',
            window_starts_at=window.starts_at.isoformat(),
            window_ends_at=window.ends_at.isoformat(),
        )
        self.window = window
