# tracker/admin.py

from django.contrib import admin
from import_export import resources
from import_export.admin import ImportExportModelAdmin

from .models import DailyLog


# Resource định nghĩa các field sẽ import/export
class DailyLogResource(resources.ModelResource):
    class Meta:
        model = DailyLog
        fields = (
            'id',
            'user',
            'date',
            'dsa_hours',
            'dsa_topics',
            'core_subjects',
            'projects',
            'self_rating',
            'created_at',
        )
        import_id_fields = ['id']


@admin.register(DailyLog)
class DailyLogAdmin(ImportExportModelAdmin):
    resource_class = DailyLogResource

    list_display = ("user", "date", "dsa_hours", "core_hours_display", "self_rating", "created_at")
    list_filter = ("date", "self_rating")
    search_fields = ("user__username", "user__email", "dsa_topics", "projects")
    date_hierarchy = "date"
    ordering = ("-date",)

    def core_hours_display(self, obj):
        return f"{obj.core_hours:.1f}"
    core_hours_display.short_description = 'Core hours'
