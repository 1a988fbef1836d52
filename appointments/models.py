"""
Reservation model
"""
from django.db import models
from user.models import User
from doctors.models import Doctor, DoctorSchedule


class Reservation(models.Model):
    """Booked or walk-in visit. Never deleted; cancelled through `status`."""
    STATUS_PENDING = 'pending'
    STATUS_CONFIRMED = 'confirmed'
    STATUS_COMPLETED = 'completed'
    STATUS_CANCELLED = 'cancelled'

    STATUS_CHOICES = [
        (STATUS_PENDING, 'Pending'),
        (STATUS_CONFIRMED, 'Confirmed'),
        (STATUS_COMPLETED, 'Completed'),
        (STATUS_CANCELLED, 'Cancelled'),
    ]
    OPEN_STATUSES = (STATUS_PENDING, STATUS_CONFIRMED)

    EXAM_NOT_STARTED = 'not_started'
    EXAM_WAITING = 'waiting'
    EXAM_IN_PROGRESS = 'in_progress'
    EXAM_WAITING_FOR_PAYMENT = 'waiting_for_payment'
    EXAM_COMPLETED = 'completed'
    EXAM_CANCELLED = 'cancelled'

    EXAMINATION_STATUS_CHOICES = [
        (EXAM_NOT_STARTED, 'Not started'),
        (EXAM_WAITING, 'Waiting'),
        (EXAM_IN_PROGRESS, 'In progress'),
        (EXAM_WAITING_FOR_PAYMENT, 'Waiting for payment'),
        (EXAM_COMPLETED, 'Completed'),
        (EXAM_CANCELLED, 'Cancelled'),
    ]

    REASON_NO_SHOW = 'NO_SHOW'
    REASON_PATIENT_REQUEST = 'PATIENT_REQUEST'
    REASON_STAFF = 'STAFF_CANCELLED'

    patient = models.ForeignKey(User, on_delete=models.CASCADE, related_name='reservations')
    doctor = models.ForeignKey(Doctor, on_delete=models.CASCADE, related_name='reservations')
    schedule = models.ForeignKey(DoctorSchedule, on_delete=models.PROTECT, related_name='reservations')
    reservation_date = models.DateField('reservation date')
    reservation_time = models.TimeField('reservation time')
    queue_number = models.PositiveIntegerField('queue number', null=True, blank=True)
    status = models.CharField('status', max_length=20, choices=STATUS_CHOICES, default=STATUS_PENDING)
    examination_status = models.CharField(
        'examination status', max_length=20, choices=EXAMINATION_STATUS_CHOICES, default=EXAM_NOT_STARTED,
    )
    complaint = models.TextField('complaint', blank=True)
    is_priority = models.BooleanField('priority', default=False)
    priority_reason = models.CharField('priority reason', max_length=255, null=True, blank=True)
    cancellation_reason = models.CharField('cancellation reason', max_length=50, null=True, blank=True)
    is_walk_in = models.BooleanField('walk-in', default=False)
    checked_in_at = models.DateTimeField('checked in at', null=True, blank=True)
    created_at = models.DateTimeField('created at', auto_now_add=True)
    updated_at = models.DateTimeField('updated at', auto_now=True)

    class Meta:
        db_table = 'reservation'
        verbose_name = 'reservation'
        verbose_name_plural = 'reservations'
        ordering = ['-reservation_date', 'queue_number']
        indexes = [
            models.Index(fields=['doctor', 'reservation_date', 'status'], name='reservation_doctor_day_idx'),
            models.Index(fields=['status', 'examination_status', 'reservation_date'], name='reservation_sweep_idx'),
        ]

    def __str__(self):
        return f'#{self.queue_number} {self.patient.name} - {self.doctor.name} - {self.reservation_date}'

    @property
    def is_open(self):
        return self.status in self.OPEN_STATUSES
