"""
Reservation serializers
"""
from django.contrib.auth import get_user_model
from django.utils import timezone
from rest_framework import serializers

from .models import Reservation
from .services import EXAMINATION_TARGETS


class ReservationSerializer(serializers.ModelSerializer):
    """Read-only reservation view"""
    patient_id = serializers.IntegerField(read_only=True)
    patient_name = serializers.CharField(source='patient.name', read_only=True)
    doctor_id = serializers.IntegerField(read_only=True)
    doctor_name = serializers.CharField(source='doctor.name', read_only=True)
    schedule_id = serializers.IntegerField(read_only=True)
    session_name = serializers.CharField(source='schedule.session.name', read_only=True, allow_null=True)

    class Meta:
        model = Reservation
        fields = [
            'id', 'patient_id', 'patient_name', 'doctor_id', 'doctor_name', 'schedule_id', 'session_name',
            'reservation_date', 'reservation_time', 'queue_number', 'status', 'examination_status',
            'complaint', 'is_priority', 'priority_reason', 'cancellation_reason', 'is_walk_in',
            'checked_in_at', 'created_at', 'updated_at',
        ]
        read_only_fields = fields


class BookingSerializer(serializers.Serializer):
    schedule_id = serializers.IntegerField(min_value=1)
    reservation_date = serializers.DateField()
    reservation_time = serializers.TimeField(required=False, allow_null=True, default=None)
    complaint = serializers.CharField(required=False, allow_blank=True, default='')

    def validate_reservation_date(self, value):
        """No bookings in the past"""
        if value < timezone.localdate():
            raise serializers.ValidationError('Cannot book a date in the past')
        return value


class RescheduleSerializer(BookingSerializer):
    complaint = None


class WalkInSerializer(serializers.Serializer):
    patient_id = serializers.PrimaryKeyRelatedField(
        source='patient',
        queryset=get_user_model().objects.filter(role='patient', is_active=True),
    )
    schedule_id = serializers.IntegerField(min_value=1)
    complaint = serializers.CharField(required=False, allow_blank=True, default='')


class CheckInSerializer(serializers.Serializer):
    reservation_id = serializers.IntegerField(min_value=1)


class ExaminationStatusSerializer(serializers.Serializer):
    examination_status = serializers.ChoiceField(choices=EXAMINATION_TARGETS)


class PrioritySerializer(serializers.Serializer):
    is_priority = serializers.BooleanField()
    priority_reason = serializers.CharField(required=False, allow_null=True, allow_blank=True, max_length=255, default=None)
