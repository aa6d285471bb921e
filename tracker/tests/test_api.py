from datetime import timedelta

from django.contrib.auth import get_user_model
from django.test import TestCase
from django.urls import reverse
from django.utils import timezone

from tracker.models import DailyLog

User = get_user_model()


class DailyLogApiTests(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(username='student', password='TestPassword123!')
        self.url = reverse('tracker:logs')
        self.today = timezone.localdate()
        self.client.force_login(self.user)

    def _payload(self, **overrides):
        payload = {
            'date': self.today.isoformat(),
            'dsa_hours': 3.5,
            'dsa_topics': 'Arrays, Two Pointers',
            'core_subjects': [
                {'name': 'Operating Systems', 'hours': 2.0, 'topics': ['Paging', ' Scheduling ']},
                {'name': 'Computer Networks', 'hours': 0},
            ],
            'projects': 'LeetCode 1-10',
            'self_rating': 4,
        }
        payload.update(overrides)
        return payload

    def test_create_log(self):
        response = self.client.post(self.url, self._payload(), content_type='application/json')

        self.assertEqual(response.status_code, 201)
        log = DailyLog.objects.get(user=self.user)
        self.assertEqual(log.dsa_hours, 3.5)
        # Môn 0 giờ bị bỏ, topics được trim
        self.assertEqual(log.core_subjects, [
            {'name': 'Operating Systems', 'hours': 2.0, 'topics': ['Paging', 'Scheduling']},
        ])
        self.assertEqual(response.json()['total_hours'], 5.5)

    def test_blank_text_fields_become_none(self):
        payload = self._payload(dsa_topics='  ', projects='')

        response = self.client.post(self.url, payload, content_type='application/json')

        self.assertEqual(response.status_code, 201)
        log = DailyLog.objects.get(user=self.user)
        self.assertEqual(log.dsa_topics, 'None')
        self.assertEqual(log.projects, 'None')

    def test_rejects_future_date(self):
        payload = self._payload(date=(self.today + timedelta(days=1)).isoformat())

        response = self.client.post(self.url, payload, content_type='application/json')

        self.assertEqual(response.status_code, 400)
        self.assertIn('date', response.json())

    def test_rejects_subject_without_name(self):
        payload = self._payload(core_subjects=[{'name': ' ', 'hours': 1}])

        response = self.client.post(self.url, payload, content_type='application/json')

        self.assertEqual(response.status_code, 400)
        self.assertFalse(DailyLog.objects.exists())

    def test_rejects_invalid_numbers(self):
        cases = [
            {'dsa_hours': -1},
            {'dsa_hours': 25},
            {'self_rating': 0},
            {'self_rating': 6},
            {'core_subjects': [{'name': 'OS', 'hours': -2}]},
        ]
        for override in cases:
            with self.subTest(override=override):
                response = self.client.post(self.url, self._payload(**override), content_type='application/json')
                self.assertEqual(response.status_code, 400)

    def test_same_date_logs_are_allowed(self):
        for _ in range(2):
            response = self.client.post(self.url, self._payload(), content_type='application/json')
            self.assertEqual(response.status_code, 201)

        self.assertEqual(DailyLog.objects.filter(user=self.user).count(), 2)

    def test_list_logs_newest_first(self):
        for offset in (3, 0, 10):
            DailyLog.objects.create(
                user=self.user, date=self.today - timedelta(days=offset), dsa_hours=1, self_rating=3,
            )

        data = self.client.get(self.url).json()

        self.assertEqual([item['date'] for item in data], [
            self.today.isoformat(),
            (self.today - timedelta(days=3)).isoformat(),
            (self.today - timedelta(days=10)).isoformat(),
        ])

    def test_list_week_range(self):
        for offset in (0, 7, 8):
            DailyLog.objects.create(
                user=self.user, date=self.today - timedelta(days=offset), dsa_hours=1, self_rating=3,
            )

        data = self.client.get(self.url, {'range': 'week'}).json()

        self.assertEqual(len(data), 2)

    def test_requires_authentication(self):
        self.client.logout()
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 403)


class DashboardApiTests(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(username='student', password='TestPassword123!')
        self.url = reverse('tracker:dashboard')
        self.today = timezone.localdate()
        self.client.force_login(self.user)

    def test_dashboard_payload(self):
        for offset in range(3):
            DailyLog.objects.create(
                user=self.user,
                date=self.today - timedelta(days=offset),
                dsa_hours=2,
                core_subjects=[{'name': 'Operating Systems', 'hours': 1.5}],
                self_rating=4,
            )

        data = self.client.get(self.url).json()

        self.assertEqual(data['today'], self.today.isoformat())
        self.assertEqual(data['total_logs'], 3)
        self.assertEqual(data['streak'], {
            'streak_days': 3,
            'most_recent_log_date': self.today.isoformat(),
        })
        self.assertEqual(len(data['weekly_chart']), 7)
        self.assertEqual(data['weekly_chart'][-1]['date'], self.today.isoformat())
        self.assertEqual(data['weekly_chart'][-1]['total_hours'], 3.5)
        self.assertEqual(data['subject_effort'], [{'name': 'Operating Systems', 'hours': 4.5}])

    def test_empty_dashboard(self):
        data = self.client.get(self.url).json()

        self.assertEqual(data['total_logs'], 0)
        self.assertEqual(data['streak'], {'streak_days': 0, 'most_recent_log_date': None})
        self.assertEqual(data['subject_effort'], [])
