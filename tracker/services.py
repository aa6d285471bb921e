from datetime import timedelta

from django.utils import timezone
from django.utils.dateparse import parse_date

from .models import DailyLog

WEEK_DAYS = 7
TOP_SUBJECTS = 7

LOG_FIELDS = (
    'date',
    'dsa_hours',
    'dsa_topics',
    'core_subjects',
    'projects',
    'self_rating',
    'created_at',
)


def get_today_for_user(user=None):
    """
    Lấy ngày hôm nay theo TIME_ZONE của project.
    Nếu sau này mỗi user có timezone riêng thì thay đổi logic ở đây.
    """
    return timezone.localdate()


def record_value(record, name, default=None):
    """Đọc field từ model instance hoặc dict (log từ ORM hay từ file đều dùng được)."""
    if isinstance(record, dict):
        return record.get(name, default)
    return getattr(record, name, default)


def record_date(record):
    """Ngày lịch của log dưới dạng datetime.date (chấp nhận cả chuỗi 'YYYY-MM-DD')."""
    value = record_value(record, 'date')
    if isinstance(value, str):
        return parse_date(value)
    return value


def fetch_recent_logs(user_id):
    """
    Toàn bộ log của user dưới dạng list dict, mới nhất trước (theo date).
    Advisor tự chọn cửa sổ 14 log gần nhất theo created_at.
    """
    return list(
        DailyLog.objects
        .filter(user_id=user_id)
        .order_by('-date', '-created_at')
        .values(*LOG_FIELDS)
    )


def create_daily_log(user, **fields):
    return DailyLog.objects.create(user=user, **fields)


def weekly_logs(user, today=None):
    """Log trong khoảng [today - 7 ngày, today], mới nhất trước."""
    today = today or get_today_for_user(user)
    return DailyLog.objects.filter(
        user=user,
        date__gte=today - timedelta(days=WEEK_DAYS),
        date__lte=today,
    ).order_by('-date', '-created_at')


def last_n_days(today, days=WEEK_DAYS):
    """Danh sách `days` ngày kết thúc ở today, cũ nhất trước."""
    return [today - timedelta(days=offset) for offset in range(days - 1, -1, -1)]


def _core_hours(record):
    return sum(float(cs.get('hours') or 0) for cs in record_value(record, 'core_subjects') or [])


def weekly_chart(logs, today):
    """
    Dữ liệu cho biểu đồ tiến độ 7 ngày.

    Mỗi ngày lấy log đầu tiên có cùng date (giống component WeeklyChart cũ),
    ngày không có log thì 0.

    Returns:
        list[dict]: [{
            'date': date,
            'dsa_hours': float,
            'core_hours': float,
            'total_hours': float,
        }, ...]  # 7 phần tử, cũ nhất trước
    """
    first_by_date = {}
    for log in logs:
        first_by_date.setdefault(record_date(log), log)

    rows = []
    for day in last_n_days(today):
        log = first_by_date.get(day)
        if log is None:
            rows.append({'date': day, 'dsa_hours': 0.0, 'core_hours': 0.0, 'total_hours': 0.0})
            continue
        dsa_hours = float(record_value(log, 'dsa_hours') or 0)
        core_hours = _core_hours(log)
        rows.append({
            'date': day,
            'dsa_hours': dsa_hours,
            'core_hours': core_hours,
            'total_hours': dsa_hours + core_hours,
        })
    return rows


def subject_effort(logs, limit=TOP_SUBJECTS):
    """
    Tổng số giờ theo từng môn core (bỏ qua môn không tên / 0 giờ),
    sắp xếp giảm dần, lấy top `limit`.
    """
    totals = {}
    for log in logs:
        for cs in record_value(log, 'core_subjects') or []:
            name = (cs.get('name') or '').strip()
            hours = float(cs.get('hours') or 0)
            if name and hours > 0:
                totals[name] = totals.get(name, 0.0) + hours

    ranked = sorted(totals.items(), key=lambda item: item[1], reverse=True)
    return [{'name': name, 'hours': hours} for name, hours in ranked[:limit]]
