from django.contrib import admin
from .models import AuditEvent


@admin.register(AuditEvent)
class AuditEventAdmin(admin.ModelAdmin):
    list_display = ("action", "resource_type", "resource_id", "user", "created_at")
    list_filter = ("action", "resource_type")
    search_fields = ("resource_id", "user__username")
    readonly_fields = ("user", "action", "resource_type", "resource_id", "details", "created_at")
