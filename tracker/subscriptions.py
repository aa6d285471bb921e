"""
Đăng ký nhận cập nhật log theo thời gian thực cho 1 user.

    unsubscribe = subscribe_to_daily_logs(user.id, on_update)
    ...
    unsubscribe()

on_update(logs) được gọi ngay 1 lần với snapshot hiện tại, sau đó mỗi khi
có log của user đó được tạo / sửa / xoá. Bên dưới dùng Django signals,
nơi gọi không phụ thuộc vào cơ chế truyền.
"""
import logging
import uuid

from django.db.models.signals import post_delete, post_save

from .models import DailyLog

logger = logging.getLogger(__name__)


def _snapshot(user_id):
    return list(DailyLog.objects.filter(user_id=user_id).order_by('-date', '-created_at'))


def subscribe_to_daily_logs(user_id, on_update):
    """
    Args:
        user_id: id của user cần theo dõi
        on_update: callable nhận list[DailyLog] (mới nhất trước)

    Returns:
        callable: hàm huỷ đăng ký (gọi nhiều lần không sao)
    """
    dispatch_uid = f"daily-logs-{user_id}-{uuid.uuid4().hex}"

    def _receiver(sender, instance, **kwargs):
        if instance.user_id != user_id:
            return
        on_update(_snapshot(user_id))

    def unsubscribe():
        post_save.disconnect(sender=DailyLog, dispatch_uid=dispatch_uid)
        post_delete.disconnect(sender=DailyLog, dispatch_uid=dispatch_uid)
        logger.debug("Unsubscribed %s", dispatch_uid)

    post_save.connect(_receiver, sender=DailyLog, weak=False, dispatch_uid=dispatch_uid)
    post_delete.connect(_receiver, sender=DailyLog, weak=False, dispatch_uid=dispatch_uid)
    logger.debug("Subscribed to daily logs of user %s (%s)", user_id, dispatch_uid)

    try:
        on_update(_snapshot(user_id))
    except Exception:
        # Snapshot đầu tiên lỗi thì nơi gọi không nhận được unsubscribe
        unsubscribe()
        raise

    return unsubscribe
