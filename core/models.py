from django.conf import settings
from django.db import models
from django.utils import timezone


class UserProfile(models.Model):
    """
    Hồ sơ chuẩn bị placement của user: ngành, năm tốt nghiệp, vị trí mục tiêu.
    Mỗi user đúng 1 profile, được upsert từ màn hình Profile Setup.
    """
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="prep_profile",
    )
    branch = models.CharField(max_length=200)
    graduation_year = models.PositiveIntegerField()
    # Để trống => dùng DEFAULT_TARGET_ROLE trong settings
    target_role = models.CharField(max_length=200, blank=True, default="")
    display_name = models.CharField(max_length=200, blank=True, default="")
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        verbose_name = "Profile"
        verbose_name_plural = "Profiles"

    def __str__(self):
        return f"{self.user} - {self.branch} ({self.graduation_year})"

    @property
    def effective_target_role(self):
        return self.target_role or settings.DEFAULT_TARGET_ROLE
