from datetime import date

from django.contrib.auth import get_user_model
from django.test import TestCase

from tracker.models import DailyLog
from tracker.subscriptions import subscribe_to_daily_logs

User = get_user_model()


class SubscribeToDailyLogsTests(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(username='student', password='TestPassword123!')
        self.other = User.objects.create_user(username='other', password='TestPassword123!')
        self.calls = []
        self.unsubscribe = None

    def tearDown(self):
        if self.unsubscribe:
            self.unsubscribe()

    def _subscribe(self):
        self.unsubscribe = subscribe_to_daily_logs(self.user.id, self.calls.append)

    def _log(self, user, day):
        return DailyLog.objects.create(user=user, date=day, dsa_hours=2, self_rating=3)

    def test_initial_snapshot(self):
        self._log(self.user, date(2024, 1, 20))
        self._log(self.user, date(2024, 1, 21))

        self._subscribe()

        self.assertEqual(len(self.calls), 1)
        self.assertEqual([log.date for log in self.calls[0]], [date(2024, 1, 21), date(2024, 1, 20)])

    def test_notified_on_create_and_delete(self):
        self._subscribe()

        log = self._log(self.user, date(2024, 1, 21))
        log_pk = log.pk
        log.delete()

        self.assertEqual(len(self.calls), 3)
        self.assertEqual(self.calls[0], [])
        self.assertEqual([entry.pk for entry in self.calls[1]], [log_pk])
        self.assertEqual(self.calls[2], [])

    def test_other_users_changes_are_ignored(self):
        self._subscribe()

        self._log(self.other, date(2024, 1, 21))

        self.assertEqual(len(self.calls), 1)

    def test_no_updates_after_unsubscribe(self):
        self._subscribe()
        self.unsubscribe()
        # gọi lần 2 vẫn không lỗi
        self.unsubscribe()

        self._log(self.user, date(2024, 1, 21))

        self.assertEqual(len(self.calls), 1)

    def test_failed_initial_snapshot_disconnects_receivers(self):
        calls = []

        def on_update(logs):
            calls.append(logs)
            raise RuntimeError('client gone')

        with self.assertRaises(RuntimeError):
            subscribe_to_daily_logs(self.user.id, on_update)

        # receiver đã bị gỡ nên create không raise lại
        self._log(self.user, date(2024, 1, 21))

        self.assertEqual(len(calls), 1)
        self.assertEqual(DailyLog.objects.filter(user=self.user).count(), 1)
