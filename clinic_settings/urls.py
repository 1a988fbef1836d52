from django.urls import path
from .views import ClinicSettingsView

urlpatterns = [
    path('', ClinicSettingsView.as_view(), name='clinic-settings'),  # GET/PUT /api/admin/settings/ - admin only
]
