from django.contrib import admin
from .models import ClinicSettings


@admin.register(ClinicSettings)
class ClinicSettingsAdmin(admin.ModelAdmin):
    list_display = ['clinic_name', 'enable_strict_check_in', 'enable_auto_cancel', 'updated_at']

    def has_add_permission(self, request):
        return not ClinicSettings.objects.exists()
