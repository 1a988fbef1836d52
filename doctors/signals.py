"""
Keep the account role in line with the doctor profile
"""
import logging

from django.db.models.signals import post_save, post_delete
from django.dispatch import receiver
from .models import Doctor
from user.models import User

logger = logging.getLogger(__name__)


@receiver(post_save, sender=Doctor)
def sync_doctor_to_user(sender, instance, created, **kwargs):
    """Copy name and role onto the linked account"""
    user = instance.user
    if user.name == instance.name and user.role == User.ROLE_DOCTOR:
        return
    user.name = instance.name
    user.role = User.ROLE_DOCTOR
    user.save(update_fields=['name', 'role', 'updated_at'])
    logger.info('Synced doctor %s to user %s', instance.pk, user.pk)


@receiver(post_delete, sender=Doctor)
def handle_doctor_delete(sender, instance, **kwargs):
    """Drop the account back to patient when the profile goes away"""
    try:
        user = User.objects.get(pk=instance.user_id)
    except User.DoesNotExist:
        return
    user.role = User.ROLE_PATIENT
    user.save(update_fields=['role', 'updated_at'])
