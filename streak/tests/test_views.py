from datetime import timedelta

from django.contrib.auth import get_user_model
from django.test import TestCase
from django.urls import reverse
from django.utils import timezone

from tracker.models import DailyLog

User = get_user_model()


class StreakStatusApiTests(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(username='student', password='TestPassword123!')
        self.url = reverse('streak:status_api')
        self.today = timezone.localdate()

    def _log(self, day):
        return DailyLog.objects.create(user=self.user, date=day, dsa_hours=2, self_rating=3)

    def test_requires_login(self):
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 302)

    def test_no_logs(self):
        self.client.force_login(self.user)

        data = self.client.get(self.url).json()

        self.assertEqual(data['current_streak'], 0)
        self.assertIsNone(data['last_log_date'])
        self.assertFalse(data['is_active_today'])

    def test_counts_consecutive_days(self):
        for offset in range(3):
            self._log(self.today - timedelta(days=offset))
        self._log(self.today - timedelta(days=5))
        self.client.force_login(self.user)

        data = self.client.get(self.url).json()

        self.assertEqual(data['today'], self.today.isoformat())
        self.assertEqual(data['current_streak'], 3)
        self.assertEqual(data['last_log_date'], self.today.isoformat())
        self.assertTrue(data['is_active_today'])

    def test_other_users_logs_are_ignored(self):
        other = User.objects.create_user(username='other', password='TestPassword123!')
        DailyLog.objects.create(user=other, date=self.today, dsa_hours=1, self_rating=2)
        self.client.force_login(self.user)

        data = self.client.get(self.url).json()

        self.assertEqual(data['current_streak'], 0)
