"""
Clinic settings (single row)
"""
from django.db import models

from .policy import (
    DEFAULT_AUTO_CANCEL_GRACE_MINUTES,
    DEFAULT_CHECK_IN_EARLY_MINUTES,
    DEFAULT_CHECK_IN_LATE_MINUTES,
)


class ClinicSettings(models.Model):
    """Clinic profile and queue policy. Always stored as pk=1."""
    SINGLETON_PK = 1

    clinic_name = models.CharField('clinic name', max_length=150, default='Clinic')
    address = models.CharField('address', max_length=255, blank=True)
    phone = models.CharField('phone', max_length=20, blank=True)
    email = models.EmailField('email', blank=True)

    enable_strict_check_in = models.BooleanField('strict check-in window', default=False)
    check_in_early_minutes = models.PositiveIntegerField('check-in opens (minutes before)', default=DEFAULT_CHECK_IN_EARLY_MINUTES)
    check_in_late_minutes = models.PositiveIntegerField('check-in closes (minutes after)', default=DEFAULT_CHECK_IN_LATE_MINUTES)
    enable_auto_cancel = models.BooleanField('auto-cancel no-shows', default=False)
    auto_cancel_grace_minutes = models.PositiveIntegerField('grace after session end (minutes)', default=DEFAULT_AUTO_CANCEL_GRACE_MINUTES)

    updated_at = models.DateTimeField('updated at', auto_now=True)

    class Meta:
        db_table = 'clinic_settings'
        verbose_name = 'clinic settings'
        verbose_name_plural = 'clinic settings'

    def __str__(self):
        return self.clinic_name

    @classmethod
    def load(cls):
        obj, _ = cls.objects.get_or_create(pk=cls.SINGLETON_PK)
        return obj
