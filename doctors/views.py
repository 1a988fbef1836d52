"""
Practice sessions, weekly schedules and per-day booking status
"""
import datetime

from rest_framework import generics
from rest_framework.permissions import IsAuthenticated
from rest_framework.views import APIView
from django.shortcuts import get_object_or_404

from utils.permissions import IsClinicalStaff, IsSystemAdmin
from utils.response import success_response, error_response
from .capacity import set_day_active
from .models import PracticeSession, DoctorSchedule, DailyScheduleStatus
from .serializers import (
    PracticeSessionSerializer,
    DoctorScheduleSerializer,
    DailyScheduleStatusSerializer,
    DayStatusUpdateSerializer,
)


class PracticeSessionList(generics.ListCreateAPIView):
    """GET: staff; POST: admin"""
    queryset = PracticeSession.objects.all()
    serializer_class = PracticeSessionSerializer
    pagination_class = None

    def get_permissions(self):
        if self.request.method == 'POST':
            return [IsSystemAdmin()]
        return [IsClinicalStaff()]

    def list(self, request, *args, **kwargs):
        return success_response(self.get_serializer(self.get_queryset(), many=True).data)

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return success_response(serializer.data, 'Session created', code=201)


class DoctorScheduleList(generics.ListCreateAPIView):
    """GET: any signed-in user (filter by doctor_id / day_of_week); POST: admin"""
    serializer_class = DoctorScheduleSerializer
    pagination_class = None

    def get_permissions(self):
        if self.request.method == 'POST':
            return [IsSystemAdmin()]
        return [IsAuthenticated()]

    def get_queryset(self):
        qs = DoctorSchedule.objects.select_related('doctor', 'session')
        params = self.request.query_params
        if params.get('doctor_id'):
            qs = qs.filter(doctor_id=params['doctor_id'])
        if params.get('day_of_week'):
            qs = qs.filter(day_of_week=params['day_of_week'])
        if params.get('active', 'true') == 'true':
            qs = qs.filter(is_active=True, doctor__is_active=True)
        return qs

    def list(self, request, *args, **kwargs):
        return success_response(self.get_serializer(self.get_queryset(), many=True).data)

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return success_response(serializer.data, 'Schedule created', code=201)


class ScheduleDayStatusView(APIView):
    """
    GET: booking counter of a schedule on one date (any signed-in user)
    PUT: open/close that date (admin)
    """

    def get_permissions(self):
        if self.request.method == 'PUT':
            return [IsSystemAdmin()]
        return [IsAuthenticated()]

    def _parse_day(self, value):
        try:
            return datetime.date.fromisoformat(value)
        except ValueError:
            return None

    def get(self, request, pk, day):
        schedule = get_object_or_404(DoctorSchedule, pk=pk)
        date = self._parse_day(day)
        if date is None:
            return error_response('date must be YYYY-MM-DD', 400)
        status = DailyScheduleStatus.objects.filter(schedule=schedule, date=date).first()
        if status is None:
            status = DailyScheduleStatus(schedule=schedule, date=date)
        return success_response(DailyScheduleStatusSerializer(status).data)

    def put(self, request, pk, day):
        schedule = get_object_or_404(DoctorSchedule, pk=pk)
        date = self._parse_day(day)
        if date is None:
            return error_response('date must be YYYY-MM-DD', 400)
        serializer = DayStatusUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        status = set_day_active(schedule.pk, date, **serializer.validated_data)
        return success_response(DailyScheduleStatusSerializer(status).data, 'Day status updated')
