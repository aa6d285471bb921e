from datetime import date, timedelta
from types import SimpleNamespace

from django.test import SimpleTestCase

from streak.services import calculate_streak


def logs_for(*dates):
    return [{'date': d} for d in dates]


def consecutive(end, days):
    return [end - timedelta(days=offset) for offset in range(days)]


class CalculateStreakTests(SimpleTestCase):
    def test_empty_logs(self):
        result = calculate_streak([], today=date(2024, 1, 21))
        self.assertEqual(result, {'streak_days': 0, 'most_recent_log_date': None})

    def test_seven_consecutive_days_ending_today(self):
        """Logs 2024-01-15 -> 2024-01-21, today = 2024-01-21."""
        logs = logs_for(*['2024-01-%02d' % day for day in range(15, 22)])

        result = calculate_streak(logs, today=date(2024, 1, 21))

        self.assertEqual(result['streak_days'], 7)
        self.assertEqual(result['most_recent_log_date'], date(2024, 1, 21))

    def test_gap_stops_the_walk(self):
        """Logs 15, 16, 18 with today = 18: the 17th is missing so only the 18th counts."""
        logs = logs_for('2024-01-15', '2024-01-16', '2024-01-18')

        result = calculate_streak(logs, today=date(2024, 1, 18))

        self.assertEqual(result['streak_days'], 1)
        self.assertEqual(result['most_recent_log_date'], date(2024, 1, 18))

    def test_streak_length_equals_collection_size_for_consecutive_run(self):
        today = date(2024, 3, 10)
        for size in (1, 2, 5, 30):
            with self.subTest(size=size):
                logs = logs_for(*consecutive(today, size))
                self.assertEqual(calculate_streak(logs, today=today)['streak_days'], size)

    def test_last_log_yesterday_keeps_streak(self):
        today = date(2024, 1, 22)
        logs = logs_for(*consecutive(date(2024, 1, 21), 3))

        result = calculate_streak(logs, today=today)

        self.assertEqual(result['streak_days'], 3)
        self.assertEqual(result['most_recent_log_date'], date(2024, 1, 21))

    def test_last_log_two_or_more_days_ago_breaks_streak(self):
        logs = logs_for(*consecutive(date(2024, 1, 20), 5))

        for today in (date(2024, 1, 22), date(2024, 1, 25), date(2024, 6, 1)):
            with self.subTest(today=today):
                result = calculate_streak(logs, today=today)
                self.assertEqual(result['streak_days'], 0)
                self.assertEqual(result['most_recent_log_date'], date(2024, 1, 20))

    def test_gap_in_middle_truncates_count(self):
        today = date(2024, 1, 21)
        logs = logs_for('2024-01-21', '2024-01-20', '2024-01-18', '2024-01-17', '2024-01-16')

        self.assertEqual(calculate_streak(logs, today=today)['streak_days'], 2)

    def test_unordered_input_is_sorted(self):
        today = date(2024, 1, 21)
        logs = logs_for('2024-01-19', '2024-01-21', '2024-01-20')

        result = calculate_streak(logs, today=today)

        self.assertEqual(result['streak_days'], 3)
        self.assertEqual(result['most_recent_log_date'], date(2024, 1, 21))

    def test_duplicate_dates_are_not_merged(self):
        """Log trùng ngày không được gộp nên chuỗi dừng ở log trùng."""
        today = date(2024, 1, 21)
        logs = logs_for('2024-01-21', '2024-01-21', '2024-01-20', '2024-01-19')

        self.assertEqual(calculate_streak(logs, today=today)['streak_days'], 1)

    def test_most_recent_date_is_max_date(self):
        logs = logs_for('2023-12-01', '2024-01-05', '2023-11-30')

        result = calculate_streak(logs, today=date(2024, 2, 1))

        self.assertEqual(result['most_recent_log_date'], date(2024, 1, 5))

    def test_accepts_model_like_objects_with_date_values(self):
        today = date(2024, 1, 21)
        logs = [SimpleNamespace(date=d) for d in consecutive(today, 4)]

        self.assertEqual(calculate_streak(logs, today=today)['streak_days'], 4)
