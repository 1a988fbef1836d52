from django.contrib import admin
from .models import Doctor, PracticeSession, DoctorSchedule, DailyScheduleStatus


@admin.register(Doctor)
class DoctorAdmin(admin.ModelAdmin):
    list_display = ['id', 'name', 'specialty', 'is_active', 'created_at']
    list_filter = ['specialty', 'is_active']
    search_fields = ['name', 'specialty']


@admin.register(PracticeSession)
class PracticeSessionAdmin(admin.ModelAdmin):
    list_display = ['id', 'name', 'start_time', 'end_time']


@admin.register(DoctorSchedule)
class DoctorScheduleAdmin(admin.ModelAdmin):
    """Weekly schedules"""
    list_display = ['id', 'doctor', 'session', 'day_of_week', 'max_patients', 'is_active']
    list_filter = ['day_of_week', 'is_active']
    search_fields = ['doctor__name']
    readonly_fields = ['created_at', 'updated_at']


@admin.register(DailyScheduleStatus)
class DailyScheduleStatusAdmin(admin.ModelAdmin):
    list_display = ['id', 'schedule', 'date', 'current_reservations', 'is_active']
    list_filter = ['is_active', 'date']
    readonly_fields = ['current_reservations', 'created_at', 'updated_at']
    date_hierarchy = 'date'
