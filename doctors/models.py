"""
Doctors, practice sessions, weekly schedules and per-day capacity counters
"""
from django.conf import settings
from django.db import models
from user.models import User


def default_max_patients():
    return settings.DEFAULT_MAX_PATIENTS


class Doctor(models.Model):
    """Doctor profile"""
    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name='doctor_profile')
    name = models.CharField('name', max_length=100)
    specialty = models.CharField('specialty', max_length=100, blank=True)
    license_number = models.CharField('license number', max_length=50, blank=True)
    is_active = models.BooleanField('active', default=True)
    created_at = models.DateTimeField('created at', auto_now_add=True)
    updated_at = models.DateTimeField('updated at', auto_now=True)

    class Meta:
        db_table = 'doctor'
        verbose_name = 'doctor'
        verbose_name_plural = 'doctors'
        ordering = ['name']

    def __str__(self):
        return self.name


class PracticeSession(models.Model):
    """
    Recurring time-of-day window, e.g. "Morning 08:00-12:00".
    `end_time` earlier than `start_time` means the session runs past midnight.
    """
    name = models.CharField('name', max_length=100)
    start_time = models.TimeField('start time')
    end_time = models.TimeField('end time')
    description = models.TextField('description', blank=True)
    created_at = models.DateTimeField('created at', auto_now_add=True)
    updated_at = models.DateTimeField('updated at', auto_now=True)

    class Meta:
        db_table = 'practice_session'
        verbose_name = 'practice session'
        verbose_name_plural = 'practice sessions'
        ordering = ['start_time']

    def __str__(self):
        return f'{self.name} {self.start_time:%H:%M}-{self.end_time:%H:%M}'

    @property
    def crosses_midnight(self):
        return self.end_time <= self.start_time


class DoctorSchedule(models.Model):
    """Weekly schedule of a doctor for one practice session"""
    DAY_CHOICES = [
        (0, 'Monday'),
        (1, 'Tuesday'),
        (2, 'Wednesday'),
        (3, 'Thursday'),
        (4, 'Friday'),
        (5, 'Saturday'),
        (6, 'Sunday'),
    ]

    doctor = models.ForeignKey(Doctor, on_delete=models.CASCADE, related_name='schedules')
    session = models.ForeignKey(PracticeSession, on_delete=models.SET_NULL, null=True, blank=True, related_name='schedules')
    day_of_week = models.PositiveSmallIntegerField('day of week', choices=DAY_CHOICES, help_text='0=Monday ... 6=Sunday')
    max_patients = models.PositiveIntegerField('max patients per day', default=default_max_patients)
    is_active = models.BooleanField('active', default=True)
    created_at = models.DateTimeField('created at', auto_now_add=True)
    updated_at = models.DateTimeField('updated at', auto_now=True)

    class Meta:
        db_table = 'doctor_schedule'
        verbose_name = 'doctor schedule'
        verbose_name_plural = 'doctor schedules'
        constraints = [
            models.UniqueConstraint(fields=['doctor', 'session', 'day_of_week'], name='unique_doctor_session_day'),
        ]
        ordering = ['day_of_week', 'session__start_time']

    def __str__(self):
        return f'{self.doctor.name} {self.get_day_of_week_display()} {self.session or "-"}'

    def runs_on(self, day):
        return self.day_of_week == day.weekday()


class DailyScheduleStatus(models.Model):
    """
    Booking counter of one schedule on one calendar date.
    `current_reservations` is both the occupancy and the last queue number handed out.
    """
    schedule = models.ForeignKey(DoctorSchedule, on_delete=models.CASCADE, related_name='daily_statuses')
    date = models.DateField('date')
    is_active = models.BooleanField('open for booking', default=True)
    current_reservations = models.PositiveIntegerField('current reservations', default=0)
    notes = models.CharField('notes', max_length=255, blank=True)
    created_at = models.DateTimeField('created at', auto_now_add=True)
    updated_at = models.DateTimeField('updated at', auto_now=True)

    class Meta:
        db_table = 'daily_schedule_status'
        verbose_name = 'daily schedule status'
        verbose_name_plural = 'daily schedule status'
        constraints = [
            models.UniqueConstraint(fields=['schedule', 'date'], name='unique_schedule_date'),
        ]

    def __str__(self):
        return f'{self.schedule_id}@{self.date}: {self.current_reservations}'
