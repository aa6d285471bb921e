"""
Chuẩn hoá timestamp `created_at` về 1 kiểu duy nhất (aware datetime).

Dữ liệu log có thể đến từ nhiều nguồn (ORM, file export, client cũ) nên
`created_at` có 3 dạng:
    - object / dict có field `seconds` (+ `nanoseconds` tuỳ chọn), kiểu
      Firestore Timestamp: {"seconds": 1705348800, "nanoseconds": 0}
      (bản export của Admin SDK dùng `_seconds` / `_nanoseconds`)
    - datetime / date của Python
    - chuỗi ISO 8601: "2024-01-15T20:00:00Z" hoặc "2024-01-15"

Mọi chỗ sort / so sánh theo created_at phải đi qua to_datetime().
"""
from collections.abc import Mapping
from datetime import date, datetime, time, timezone as dt_timezone

from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime


def _seconds_fields(value):
    if isinstance(value, Mapping):
        seconds = value.get('seconds', value.get('_seconds'))
        nanos = value.get('nanoseconds', value.get('_nanoseconds', 0))
    else:
        seconds = getattr(value, 'seconds', None)
        nanos = getattr(value, 'nanoseconds', 0)
    return seconds, nanos or 0


def to_datetime(value):
    """
    Trả về aware datetime cho mọi dạng timestamp hợp lệ.
    None (log thiếu created_at) => thời điểm hiện tại.

    Raises:
        ValueError: chuỗi không parse được
        TypeError: kiểu dữ liệu không nhận diện được
    """
    if value is None:
        return timezone.now()

    if isinstance(value, datetime):
        if timezone.is_naive(value):
            return timezone.make_aware(value)
        return value

    if isinstance(value, date):
        return timezone.make_aware(datetime.combine(value, time.min))

    if isinstance(value, str):
        text = value.strip()
        parsed = parse_datetime(text)
        if parsed is not None:
            return to_datetime(parsed)
        parsed_date = parse_date(text)
        if parsed_date is not None:
            return to_datetime(parsed_date)
        raise ValueError(f"Unrecognized timestamp string: {value!r}")

    seconds, nanos = _seconds_fields(value)
    if seconds is not None:
        return datetime.fromtimestamp(
            float(seconds) + float(nanos) / 1_000_000_000,
            tz=dt_timezone.utc,
        )

    raise TypeError(f"Unsupported timestamp type: {type(value).__name__}")
