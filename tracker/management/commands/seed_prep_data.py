# tracker/management/commands/seed_prep_data.py
"""
Seed profile + daily logs mẫu cho 1 user để test dashboard / AI analysis.
Run with: python manage.py seed_prep_data --username demo [--file logs.json]

File JSON (tuỳ chọn) có dạng:
{
    "profile": {"branch": "...", "graduation_year": 2025},
    "logs": [
        {"date": "2024-01-15", "dsa_hours": 3.5, ..., "created_at": {"seconds": 1705348800}}
    ]
}
created_at có thể là {"seconds": ...}, chuỗi ISO hoặc bỏ trống.
"""
import json
from pathlib import Path

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from core.services import upsert_user_profile
from tracker.models import DailyLog
from tracker.services import create_daily_log
from tracker.timestamps import to_datetime

SAMPLE_PROFILE = {
    'branch': 'Computer Science Engineering',
    'graduation_year': 2025,
    'display_name': 'Test Student',
}

SAMPLE_LOGS = [
    {
        'date': '2024-01-15',
        'dsa_hours': 3.5,
        'dsa_topics': 'Arrays, Two Pointers, Sliding Window',
        'core_subjects': [
            {'name': 'Operating Systems', 'hours': 2.0},
            {'name': 'Database Management', 'hours': 1.5},
        ],
        'projects': 'Completed LeetCode problems 1-10. Reviewed OS concepts.',
        'self_rating': 4,
        'created_at': '2024-01-15T20:00:00Z',
    },
    {
        'date': '2024-01-16',
        'dsa_hours': 4.0,
        'dsa_topics': 'Binary Search, Linked Lists',
        'core_subjects': [
            {'name': 'Computer Networks', 'hours': 2.5},
            {'name': 'Operating Systems', 'hours': 1.0},
        ],
        'projects': 'Built a chat application using WebSockets. Practiced networking concepts.',
        'self_rating': 5,
        'created_at': '2024-01-16T19:30:00Z',
    },
    {
        'date': '2024-01-17',
        'dsa_hours': 2.0,
        'dsa_topics': 'Stacks, Queues',
        'core_subjects': [
            {'name': 'Database Management', 'hours': 3.0},
        ],
        'projects': 'Designed database schema for e-commerce platform. SQL practice.',
        'self_rating': 3,
        'created_at': '2024-01-17T21:00:00Z',
    },
    {
        'date': '2024-01-18',
        'dsa_hours': 5.0,
        'dsa_topics': 'Trees, Binary Trees, BST',
        'core_subjects': [
            {'name': 'Operating Systems', 'hours': 1.5},
            {'name': 'Computer Networks', 'hours': 1.0},
        ],
        'projects': 'Solved 15 tree-based problems. Mock interview practice.',
        'self_rating': 4,
        'created_at': '2024-01-18T18:45:00Z',
    },
    {
        'date': '2024-01-19',
        'dsa_hours': 3.0,
        'dsa_topics': 'Graphs, DFS, BFS',
        'core_subjects': [
            {'name': 'Database Management', 'hours': 2.0},
            {'name': 'Operating Systems', 'hours': 2.0},
        ],
        'projects': 'Implemented graph algorithms. Reviewed DBMS normalization.',
        'self_rating': 4,
        'created_at': '2024-01-19T20:15:00Z',
    },
    {
        'date': '2024-01-20',
        'dsa_hours': 2.5,
        'dsa_topics': 'Dynamic Programming basics',
        'core_subjects': [
            {'name': 'Computer Networks', 'hours': 2.5},
        ],
        'projects': 'Started DP problems. Network protocols revision.',
        'self_rating': 3,
        'created_at': '2024-01-20T19:00:00Z',
    },
    {
        'date': '2024-01-21',
        'dsa_hours': 4.5,
        'dsa_topics': 'Dynamic Programming, Greedy Algorithms',
        'core_subjects': [
            {'name': 'Operating Systems', 'hours': 2.0},
            {'name': 'Database Management', 'hours': 1.5},
        ],
        'projects': 'Solved 10 DP problems. System design practice.',
        'self_rating': 5,
        'created_at': '2024-01-21T21:30:00Z',
    },
]


class Command(BaseCommand):
    help = 'Seed a sample profile and daily preparation logs for a user'

    def add_arguments(self, parser):
        parser.add_argument('--username', required=True, help='User to seed (created if missing)')
        parser.add_argument('--file', help='JSON file with "profile" and "logs" keys')
        parser.add_argument('--clear', action='store_true', help='Delete existing logs of the user first')

    def handle(self, *args, **options):
        profile_data, logs_data = self._load(options.get('file'))

        User = get_user_model()
        user, created = User.objects.get_or_create(username=options['username'])
        if created:
            user.set_unusable_password()
            user.save(update_fields=['password'])
            self.stdout.write(f"Created user {user.username}")

        with transaction.atomic():
            if options['clear']:
                deleted, _ = DailyLog.objects.filter(user=user).delete()
                self.stdout.write(f"Deleted {deleted} existing logs")

            upsert_user_profile(
                user,
                branch=profile_data['branch'],
                graduation_year=int(profile_data['graduation_year']),
                target_role=profile_data.get('target_role', ''),
                display_name=profile_data.get('display_name', ''),
            )

            for item in logs_data:
                create_daily_log(
                    user,
                    date=item['date'],
                    dsa_hours=float(item['dsa_hours']),
                    dsa_topics=item.get('dsa_topics') or 'None',
                    core_subjects=item.get('core_subjects', []),
                    projects=item.get('projects') or 'None',
                    self_rating=int(item['self_rating']),
                    created_at=to_datetime(item.get('created_at')),
                )

        self.stdout.write(self.style.SUCCESS(
            f"Seeded profile and {len(logs_data)} daily logs for {user.username}"
        ))

    def _load(self, path):
        if not path:
            return SAMPLE_PROFILE, SAMPLE_LOGS

        file_path = Path(path)
        if not file_path.exists():
            raise CommandError(f"File not found: {file_path}")

        try:
            data = json.loads(file_path.read_text(encoding='utf-8'))
        except json.JSONDecodeError as e:
            raise CommandError(f"Invalid JSON in {file_path}: {e}") from e

        return data.get('profile', SAMPLE_PROFILE), data.get('logs', [])
