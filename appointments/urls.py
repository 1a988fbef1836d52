"""
Patient reservation routes
"""
from django.urls import path, include
from rest_framework.routers import DefaultRouter
from .views import ReservationViewSet

router = DefaultRouter()
router.register(r'', ReservationViewSet, basename='reservation')

urlpatterns = [
    path('', include(router.urls)),
    # GET  /appointments/                     - own reservations
    # GET  /appointments/{id}/                - detail
    # POST /appointments/book/                - book
    # POST /appointments/{id}/cancel/         - cancel
    # PUT  /appointments/{id}/reschedule/     - reschedule
]
