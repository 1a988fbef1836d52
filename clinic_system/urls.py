"""
URL configuration for clinic_system project.
"""
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView, SpectacularRedocView

from appointments.views import AutoCancelJobView

urlpatterns = [
    path('admin/', admin.site.urls),

    # API docs
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
    path('api/redoc/', SpectacularRedocView.as_view(url_name='schema'), name='redoc'),

    # API routes
    path('api/auth/', include('user.urls')),                        # login / token refresh / me
    path('api/admin/settings/', include('clinic_settings.urls')),   # clinic settings + queue policy
    path('api/doctors/', include('doctors.urls')),                  # practice sessions and schedules
    path('api/appointments/', include('appointments.urls')),        # patient booking / cancel / reschedule
    path('api/queue/', include('appointments.queue_urls')),         # reception desk queue
    path('api/internal/jobs/auto-cancel/', AutoCancelJobView.as_view(), name='auto-cancel-job'),  # scheduled no-show sweep
]
