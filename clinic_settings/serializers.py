from rest_framework import serializers

from .models import ClinicSettings


class ClinicProfileSerializer(serializers.ModelSerializer):
    """Clinic profile fields. Policy fields are normalized separately."""

    class Meta:
        model = ClinicSettings
        fields = ['clinic_name', 'address', 'phone', 'email']
        extra_kwargs = {
            'clinic_name': {'required': False},
        }


class ClinicSettingsSerializer(serializers.ModelSerializer):

    class Meta:
        model = ClinicSettings
        fields = [
            'clinic_name', 'address', 'phone', 'email',
            'enable_strict_check_in', 'check_in_early_minutes', 'check_in_late_minutes',
            'enable_auto_cancel', 'auto_cancel_grace_minutes', 'updated_at',
        ]
        read_only_fields = fields
