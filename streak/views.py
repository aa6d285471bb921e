from django.contrib.auth.decorators import login_required
from django.http import JsonResponse

from tracker.models import DailyLog
from tracker.services import get_today_for_user

from .services import calculate_streak


@login_required
def streak_status_api(request):
    """
    API trả về JSON status streak hiện tại, tính lại từ toàn bộ log của user.
    """
    today = get_today_for_user(request.user)
    logs = DailyLog.objects.filter(user=request.user).only('date')
    result = calculate_streak(logs, today=today)
    last_log_date = result['most_recent_log_date']

    data = {
        "today": today.isoformat(),
        "current_streak": result['streak_days'],
        "last_log_date": last_log_date.isoformat() if last_log_date else None,
        "is_active_today": last_log_date == today,
    }
    return JsonResponse(data)
