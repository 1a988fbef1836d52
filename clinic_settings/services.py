import logging

from django.db import transaction

from .models import ClinicSettings
from .policy import POLICY_FIELDS, normalize_policy

logger = logging.getLogger(__name__)

PROFILE_FIELDS = ('clinic_name', 'address', 'phone', 'email')


def load_policy():
    """Read the stored policy once; callers pass the result down explicitly."""
    row = ClinicSettings.objects.filter(pk=ClinicSettings.SINGLETON_PK).first()
    return normalize_policy(row)


@transaction.atomic
def save_settings(profile=None, raw_policy=None):
    """
    Update the settings row. Profile values are expected to be validated
    already; policy values are normalized, never rejected. Policy fields that
    are absent from `raw_policy` keep their stored value.
    """
    settings_row = ClinicSettings.objects.select_for_update().get_or_create(pk=ClinicSettings.SINGLETON_PK)[0]

    for name in PROFILE_FIELDS:
        if profile and name in profile:
            setattr(settings_row, name, profile[name])

    merged = normalize_policy(settings_row).as_dict()
    for name in POLICY_FIELDS:
        if raw_policy and name in raw_policy:
            merged[name] = raw_policy[name]
    policy = normalize_policy(merged)
    for name, value in policy.as_dict().items():
        setattr(settings_row, name, value)

    settings_row.save()
    logger.info('Queue policy updated: %s', policy.as_dict())
    return settings_row, policy
