from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils import timezone


class DailyLog(models.Model):
    """
    Nhật ký chuẩn bị placement của user theo từng ngày.
    Không ràng buộc unique (user, date): user có thể ghi nhiều log cùng ngày.
    """
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="daily_logs",
    )
    date = models.DateField(db_index=True)  # Ngày lịch YYYY-MM-DD, không có timezone
    dsa_hours = models.FloatField(
        validators=[MinValueValidator(0), MaxValueValidator(24)],
        help_text="Số giờ luyện DSA / thuật toán",
    )
    dsa_topics = models.TextField(blank=True, default="None")
    # [{"name": "Operating Systems", "hours": 2.0, "topics": ["Paging"]}, ...]
    core_subjects = models.JSONField(default=list, blank=True)
    projects = models.TextField(blank=True, default="None")
    self_rating = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(5)],
    )
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ['-date', '-created_at']
        verbose_name = "Daily log"
        verbose_name_plural = "Daily logs"

    def __str__(self):
        return f"{self.user} - {self.date}"

    @property
    def core_hours(self):
        return sum(float(cs.get('hours') or 0) for cs in self.core_subjects or [])

    @property
    def total_hours(self):
        return self.dsa_hours + self.core_hours
