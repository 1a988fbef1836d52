"""
Reservation views: patient booking and the reception desk queue
"""
import datetime

from django.utils import timezone
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.views import APIView

from clinic_settings.services import load_policy
from utils.permissions import (
    HasCronSecret,
    IsClinicalStaff,
    IsFrontDesk,
    IsOwnerOrClinicalStaff,
    IsOwnerOrFrontDesk,
    IsPatient,
    IsQueueOperator,
)
from utils.response import error_response, paginated_response, success_response
from . import services
from .deadlines import reservation_check_in_window
from .exceptions import ReservationNotFound
from .models import Reservation
from .serializers import (
    BookingSerializer,
    CheckInSerializer,
    ExaminationStatusSerializer,
    PrioritySerializer,
    RescheduleSerializer,
    ReservationSerializer,
    WalkInSerializer,
)
from .sweep import run_auto_cancel_sweep


class ReservationViewSet(viewsets.GenericViewSet):
    """Patient side: own reservations, booking, cancel, reschedule"""
    serializer_class = ReservationSerializer
    permission_classes = [IsPatient]
    lookup_value_regex = r'\d+'

    def get_queryset(self):
        """Only the signed-in patient's reservations"""
        return (
            Reservation.objects.filter(patient=self.request.user)
            .select_related('doctor', 'patient', 'schedule__session')
            .order_by('-reservation_date', '-reservation_time', '-id')
        )

    def list(self, request, *args, **kwargs):
        queryset = self.get_queryset()
        status = request.query_params.get('status')
        if status:
            queryset = queryset.filter(status=status)
        return paginated_response(self.paginator, queryset, self.get_serializer_class(), request)

    def retrieve(self, request, *args, **kwargs):
        return success_response(self.get_serializer(self.get_object()).data)

    def _own_reservation_id(self, pk):
        if not self.get_queryset().filter(pk=pk).exists():
            raise ReservationNotFound()
        return pk

    @action(detail=False, methods=['post'], url_path='book')
    def book(self, request):
        """Book a reservation and receive a queue number"""
        serializer = BookingSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        reservation = services.book_reservation(patient=request.user, **serializer.validated_data)
        return success_response(ReservationSerializer(reservation).data, 'Reservation booked', code=201)

    @action(detail=True, methods=['post'], url_path='cancel')
    def cancel(self, request, pk=None):
        """Cancel an own pending/confirmed reservation"""
        reservation = services.cancel_reservation(self._own_reservation_id(pk))
        return success_response(ReservationSerializer(reservation).data, 'Reservation cancelled')

    @action(detail=True, methods=['put'], url_path='reschedule')
    def reschedule(self, request, pk=None):
        """Move an own reservation to another schedule or date"""
        reservation_id = self._own_reservation_id(pk)
        serializer = RescheduleSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        reservation = services.reschedule_reservation(reservation_id, **serializer.validated_data)
        return success_response(ReservationSerializer(reservation).data, 'Reservation rescheduled')


class WalkInView(APIView):
    """Register a walk-in patient for today"""
    permission_classes = [IsFrontDesk]

    def post(self, request):
        serializer = WalkInSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        reservation = services.register_walk_in(**serializer.validated_data)
        return success_response(ReservationSerializer(reservation).data, 'Walk-in registered', code=201)


class CheckInView(APIView):
    """Check a patient in: front desk for anyone, patients for themselves"""
    permission_classes = [IsAuthenticated, IsOwnerOrFrontDesk]

    def post(self, request):
        serializer = CheckInSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        reservation_id = serializer.validated_data['reservation_id']

        reservation = Reservation.objects.filter(pk=reservation_id).first()
        if reservation is None:
            raise ReservationNotFound()
        self.check_object_permissions(request, reservation)

        reservation = services.check_in(reservation_id, policy=load_policy())
        return success_response(ReservationSerializer(reservation).data, 'Checked in')


class CheckInWindowView(APIView):
    """Check-in window and no-show deadline of one reservation"""
    permission_classes = [IsAuthenticated, IsOwnerOrClinicalStaff]

    def get(self, request, pk):
        reservation = Reservation.objects.select_related('schedule__session').filter(pk=pk).first()
        if reservation is None:
            raise ReservationNotFound()
        self.check_object_permissions(request, reservation)

        policy = load_policy()
        window = reservation_check_in_window(reservation, policy)
        data = window.as_dict()
        data.update({
            'reservation_id': reservation.pk,
            'no_show_deadline': window.ends_at.isoformat(),
            'strict': policy.enable_strict_check_in,
            'is_open_now': window.contains(timezone.now()),
        })
        return success_response(data)


class ExaminationStatusView(APIView):
    permission_classes = [IsClinicalStaff]

    def put(self, request, pk):
        serializer = ExaminationStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        reservation = services.update_examination_status(pk, serializer.validated_data['examination_status'])
        return success_response(ReservationSerializer(reservation).data, 'Status updated')


class PriorityView(APIView):
    """
    PUT {is_priority, priority_reason}
    Turning priority on moves the patient to queue number 1.
    """
    permission_classes = [IsQueueOperator]

    def put(self, request, pk):
        serializer = PrioritySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = services.update_priority(
            pk,
            serializer.validated_data['is_priority'],
            serializer.validated_data.get('priority_reason'),
        )
        return success_response(result, 'Priority updated')


class QueueByDateView(APIView):
    """Waiting and in-progress patients of one day, per doctor"""
    permission_classes = [IsQueueOperator]

    def get(self, request):
        raw = request.query_params.get('date')
        if raw:
            try:
                day = datetime.date.fromisoformat(raw)
            except ValueError:
                return error_response('date must be YYYY-MM-DD', 400)
        else:
            day = timezone.localdate()

        groups = services.queue_for_date(day)
        return success_response({
            'date': day.isoformat(),
            'doctors': [
                {
                    'doctor_id': group['doctor'].pk,
                    'doctor_name': group['doctor'].name,
                    'queue': ReservationSerializer(group['reservations'], many=True).data,
                }
                for group in groups
            ],
        })


class EmergencyCasesView(APIView):
    """Priority reservations from today on"""
    permission_classes = [IsClinicalStaff]

    def get(self, request):
        cases = services.emergency_cases()
        return success_response(ReservationSerializer(cases, many=True).data)


class AutoCancelJobView(APIView):
    """Scheduled trigger for the no-show sweep"""
    authentication_classes = []
    permission_classes = [HasCronSecret]

    def get(self, request):
        return self._run()

    def post(self, request):
        return self._run()

    def _run(self):
        result = run_auto_cancel_sweep()
        if result['skipped']:
            return success_response(result, 'Auto-cancel is disabled')
        return success_response(dict(result, ok=True), 'Sweep finished')
