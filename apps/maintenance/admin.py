from django.contrib import admin
from simple_history.admin import SimpleHistoryAdmin

from .models import MaintenanceSettings, PageStatus


@admin.register(MaintenanceSettings)
class MaintenanceSettingsAdmin(SimpleHistoryAdmin):
    list_display = ("is_active", "ends_at", "updated_at")
    readonly_fields = ("created_at", "updated_at")

    def has_add_permission(self, request):
        return not MaintenanceSettings.objects.exists()

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(PageStatus)
class PageStatusAdmin(admin.ModelAdmin):
    list_display = ("path", "title", "status", "updated_at")
    list_filter = ("status",)
    search_fields = ("path", "title")
    readonly_fields = ("updated_at",)

    def has_delete_permission(self, request, obj=None):
        return False
