from datetime import date

from django.test import SimpleTestCase

from readiness.prompts import build_readiness_prompt, format_core_subjects, format_daily_logs


class PromptTests(SimpleTestCase):
    def setUp(self):
        self.profile = {'branch': 'Computer Science Engineering', 'graduation_year': 2025}
        self.logs = [
            {
                'date': date(2024, 1, 15),
                'dsa_hours': 3.5,
                'dsa_topics': 'Arrays, Two Pointers',
                'core_subjects': [
                    {'name': 'Operating Systems', 'hours': 2.0, 'topics': ['Paging', 'Deadlocks']},
                    {'name': 'Database Management', 'hours': 1.5},
                ],
                'projects': 'LeetCode 1-10',
                'self_rating': 4,
            },
            {
                'date': date(2024, 1, 16),
                'dsa_hours': 4,
                'dsa_topics': 'None',
                'core_subjects': [],
                'projects': '',
                'self_rating': 5,
            },
        ]

    def test_profile_lines(self):
        prompt = build_readiness_prompt(self.profile, self.logs, 'Backend Developer')

        self.assertIn('- Target Role: Backend Developer', prompt)
        self.assertIn('- Branch: Computer Science Engineering', prompt)
        self.assertIn('- Graduation Year: 2025', prompt)
        self.assertIn('"readiness_score"', prompt)
        self.assertIn('"days_6_to_7"', prompt)

    def test_logs_are_numbered_in_order(self):
        text = format_daily_logs(self.logs)

        self.assertIn('Day 1 (2024-01-15):', text)
        self.assertIn('Day 2 (2024-01-16):', text)
        self.assertLess(text.index('Day 1'), text.index('Day 2'))
        self.assertIn('- DSA Hours: 3.5', text)
        self.assertIn('- DSA Hours: 4\n', text)
        self.assertIn('- Projects/Practice: None', text)
        self.assertIn('- Self-Rating: 4/5', text)

    def test_core_subject_topics(self):
        text = format_core_subjects(self.logs[0]['core_subjects'])

        self.assertEqual(text, (
            '  - Operating Systems: 2 hours (topics: Paging, Deadlocks)\n'
            '  - Database Management: 1.5 hours'
        ))

    def test_empty_core_subjects(self):
        self.assertEqual(format_core_subjects([]), '  - None')
