"""
Reception desk queue routes
"""
from django.urls import path
from .views import (
    WalkInView,
    CheckInView,
    CheckInWindowView,
    ExaminationStatusView,
    PriorityView,
    QueueByDateView,
    EmergencyCasesView,
)

urlpatterns = [
    path('walk-in/', WalkInView.as_view(), name='queue-walk-in'),                                   # POST - front desk
    path('checkin/', CheckInView.as_view(), name='queue-check-in'),                                 # POST - front desk / own patient
    path('<int:pk>/check-in-window/', CheckInWindowView.as_view(), name='queue-check-in-window'),   # GET
    path('<int:pk>/status/', ExaminationStatusView.as_view(), name='queue-status'),                 # PUT - staff
    path('<int:pk>/priority/', PriorityView.as_view(), name='queue-priority'),                      # PUT - queue operators
    path('date/', QueueByDateView.as_view(), name='queue-by-date'),                                 # GET ?date=YYYY-MM-DD
    path('emergency/', EmergencyCasesView.as_view(), name='queue-emergency'),                       # GET - staff
]
