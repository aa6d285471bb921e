from django.contrib import admin

from .models import UserProfile


@admin.register(UserProfile)
class UserProfileAdmin(admin.ModelAdmin):
    list_display = ("user", "branch", "graduation_year", "target_role", "created_at")
    list_filter = ("graduation_year",)
    search_fields = ("user__username", "user__email", "branch", "target_role")
