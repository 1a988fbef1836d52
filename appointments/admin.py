from django.contrib import admin
from .models import Reservation


@admin.register(Reservation)
class ReservationAdmin(admin.ModelAdmin):
    list_display = ['id', 'patient', 'doctor', 'reservation_date', 'reservation_time', 'queue_number',
                    'status', 'examination_status', 'is_priority']
    list_filter = ['status', 'examination_status', 'is_priority', 'reservation_date']
    search_fields = ['patient__name', 'patient__phone', 'doctor__name']
    readonly_fields = ['queue_number', 'created_at', 'updated_at']
