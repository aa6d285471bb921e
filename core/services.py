from .models import UserProfile


def fetch_user_profile(user_id):
    """
    Đọc profile của user dưới dạng dict (dùng cho ReadinessAdvisor).

    Returns:
        dict | None: {
            'branch': str,
            'graduation_year': int,
            'target_role': str,   # '' nếu user chưa nhập
            'display_name': str,
            'created_at': datetime,
        }
        None nếu user chưa tạo profile.
    """
    return (
        UserProfile.objects
        .filter(user_id=user_id)
        .values('branch', 'graduation_year', 'target_role', 'display_name', 'created_at')
        .first()
    )


def upsert_user_profile(user, branch, graduation_year, target_role='', display_name=''):
    """Tạo mới hoặc cập nhật profile. created_at giữ nguyên khi update."""
    profile, created = UserProfile.objects.update_or_create(
        user=user,
        defaults={
            'branch': branch,
            'graduation_year': graduation_year,
            'target_role': target_role,
            'display_name': display_name,
        },
    )
    return profile, created
