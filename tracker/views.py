# tracker/views.py
"""
API Views cho daily log.
Sử dụng Django Rest Framework.
"""

from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from streak.services import calculate_streak

from .models import DailyLog
from .serializers import DailyLogSerializer
from .services import get_today_for_user, subject_effort, weekly_chart, weekly_logs


class DailyLogListCreateView(APIView):
    """
    GET  /api/logs/             -> toàn bộ log, mới nhất trước
    GET  /api/logs/?range=week  -> log 7 ngày gần nhất
    POST /api/logs/             -> tạo log mới

    POST body:
    {
        "date": "2024-01-21",
        "dsa_hours": 4.5,
        "dsa_topics": "Dynamic Programming, Greedy",
        "core_subjects": [{"name": "Operating Systems", "hours": 2.0}],
        "projects": "Solved 10 DP problems.",
        "self_rating": 5
    }
    """
    permission_classes = [IsAuthenticated]

    def get(self, request):
        if request.query_params.get('range') == 'week':
            queryset = weekly_logs(request.user)
        else:
            queryset = DailyLog.objects.filter(user=request.user).order_by('-date', '-created_at')

        serializer = DailyLogSerializer(queryset, many=True)
        return Response(serializer.data)

    def post(self, request):
        serializer = DailyLogSerializer(data=request.data, context={'request': request})
        serializer.is_valid(raise_exception=True)
        log = serializer.save()
        return Response(DailyLogSerializer(log).data, status=status.HTTP_201_CREATED)


class DashboardView(APIView):
    """
    GET /api/logs/dashboard/

    Gom dữ liệu cho dashboard trong 1 request:
    {
        "today": "2024-01-21",
        "total_logs": 7,
        "streak": {"streak_days": 7, "most_recent_log_date": "2024-01-21"},
        "weekly_chart": [{"date": ..., "dsa_hours": ..., "core_hours": ..., "total_hours": ...}],
        "subject_effort": [{"name": "Operating Systems", "hours": 8.5}, ...]
    }
    """
    permission_classes = [IsAuthenticated]

    def get(self, request):
        today = get_today_for_user(request.user)
        logs = list(DailyLog.objects.filter(user=request.user).order_by('-date', '-created_at'))

        streak = calculate_streak(logs, today=today)
        most_recent = streak['most_recent_log_date']

        return Response({
            'today': today.isoformat(),
            'total_logs': len(logs),
            'streak': {
                'streak_days': streak['streak_days'],
                'most_recent_log_date': most_recent.isoformat() if most_recent else None,
            },
            'weekly_chart': [
                {**row, 'date': row['date'].isoformat()}
                for row in weekly_chart(logs, today)
            ],
            'subject_effort': subject_effort(logs),
        })
