from django.urls import path
from .views import PracticeSessionList, DoctorScheduleList, ScheduleDayStatusView

urlpatterns = [
    path('sessions/', PracticeSessionList.as_view(), name='practice-session-list'),    # GET staff / POST admin
    path('schedules/', DoctorScheduleList.as_view(), name='doctor-schedule-list'),     # GET signed-in / POST admin
    path('schedules/<int:pk>/days/<str:day>/', ScheduleDayStatusView.as_view(), name='schedule-day-status'),  # GET signed-in / PUT admin
]
