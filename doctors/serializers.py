"""
Doctor / schedule serializers
"""
from rest_framework import serializers
from .models import Doctor, PracticeSession, DoctorSchedule, DailyScheduleStatus


class DoctorSerializer(serializers.ModelSerializer):
    user_id = serializers.IntegerField(source='user.id', read_only=True)

    class Meta:
        model = Doctor
        fields = ['id', 'user_id', 'name', 'specialty', 'license_number', 'is_active', 'created_at', 'updated_at']
        read_only_fields = ['id', 'user_id', 'created_at', 'updated_at']


class PracticeSessionSerializer(serializers.ModelSerializer):
    crosses_midnight = serializers.BooleanField(read_only=True)

    class Meta:
        model = PracticeSession
        fields = ['id', 'name', 'start_time', 'end_time', 'description', 'crosses_midnight', 'created_at', 'updated_at']
        read_only_fields = ['id', 'created_at', 'updated_at']

    def validate(self, attrs):
        if attrs.get('start_time') == attrs.get('end_time'):
            raise serializers.ValidationError({'end_time': 'A session cannot start and end at the same time'})
        return attrs


class DoctorScheduleSerializer(serializers.ModelSerializer):
    """Weekly schedule"""
    doctor_id = serializers.PrimaryKeyRelatedField(source='doctor', queryset=Doctor.objects.all())
    doctor_name = serializers.CharField(source='doctor.name', read_only=True)
    session_id = serializers.PrimaryKeyRelatedField(
        source='session', queryset=PracticeSession.objects.all(), required=False, allow_null=True,
    )
    session = PracticeSessionSerializer(read_only=True)

    class Meta:
        model = DoctorSchedule
        fields = ['id', 'doctor_id', 'doctor_name', 'session_id', 'session', 'day_of_week',
                  'max_patients', 'is_active', 'created_at', 'updated_at']
        read_only_fields = ['id', 'doctor_name', 'session', 'created_at', 'updated_at']

    def validate_max_patients(self, value):
        if value < 1:
            raise serializers.ValidationError('max_patients must be at least 1')
        return value


class DailyScheduleStatusSerializer(serializers.ModelSerializer):
    schedule_id = serializers.IntegerField(read_only=True)
    max_patients = serializers.IntegerField(source='schedule.max_patients', read_only=True)
    remaining = serializers.SerializerMethodField()

    class Meta:
        model = DailyScheduleStatus
        fields = ['id', 'schedule_id', 'date', 'is_active', 'current_reservations', 'max_patients',
                  'remaining', 'notes', 'updated_at']
        read_only_fields = fields

    def get_remaining(self, obj):
        return max(0, obj.schedule.max_patients - obj.current_reservations)


class DayStatusUpdateSerializer(serializers.Serializer):
    is_active = serializers.BooleanField()
    notes = serializers.CharField(required=False, allow_blank=True, max_length=255, default='')
