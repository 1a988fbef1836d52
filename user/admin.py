from django.contrib import admin
from .models import User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ['id', 'name', 'phone', 'role', 'status', 'is_active', 'created_at']
    list_filter = ['role', 'status', 'is_active']
    search_fields = ['name', 'phone']
