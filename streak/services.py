from datetime import timedelta

from tracker.services import get_today_for_user, record_date


def calculate_streak(logs, today=None):
    """
    Tính streak: số ngày liên tiếp có log, kết thúc ở log gần nhất.

    Log gần nhất là hôm nay hoặc hôm qua thì streak còn sống; cũ hơn thì
    streak = 0. Các log trùng ngày KHÔNG bị gộp: log trùng không phải
    "đúng 1 ngày trước" nên chuỗi dừng tại đó.

    Args:
        logs: iterable các log (model DailyLog hoặc dict), field `date` là
            datetime.date hoặc chuỗi 'YYYY-MM-DD'
        today: ngày tham chiếu, mặc định timezone.localdate()

    Returns:
        dict: {
            'streak_days': int,
            'most_recent_log_date': date or None,
        }
    """
    dates = sorted((record_date(log) for log in logs), reverse=True)
    if not dates:
        return {'streak_days': 0, 'most_recent_log_date': None}

    today = today or get_today_for_user()
    most_recent = dates[0]

    # Cho phép trễ 1 ngày (log gần nhất là hôm qua)
    if (today - most_recent).days > 1:
        return {'streak_days': 0, 'most_recent_log_date': most_recent}

    streak = 1
    current = most_recent
    for log_date in dates[1:]:
        if log_date == current - timedelta(days=1):
            streak += 1
            current = log_date
        else:
            break

    return {'streak_days': streak, 'most_recent_log_date': most_recent}
