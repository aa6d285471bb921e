# tracker/serializers.py
"""
DRF Serializers cho daily log API.
"""

from rest_framework import serializers

from .models import DailyLog
from .services import create_daily_log, get_today_for_user


class CoreSubjectSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=200, allow_blank=True)
    hours = serializers.FloatField(min_value=0, max_value=24)
    topics = serializers.ListField(
        child=serializers.CharField(max_length=200),
        required=False,
    )


class DailyLogSerializer(serializers.ModelSerializer):
    """
    Serializer cho tạo / đọc daily log.

    Quy tắc giống form cũ:
    - Môn core thiếu tên => lỗi; môn 0 giờ bị bỏ đi
    - dsa_topics / projects để trống => "None"
    - Không cho ghi log cho ngày trong tương lai
    """
    core_subjects = CoreSubjectSerializer(many=True, required=False)
    dsa_topics = serializers.CharField(required=False, allow_blank=True)
    projects = serializers.CharField(required=False, allow_blank=True)
    core_hours = serializers.FloatField(read_only=True)
    total_hours = serializers.FloatField(read_only=True)

    class Meta:
        model = DailyLog
        fields = [
            'id',
            'date',
            'dsa_hours',
            'dsa_topics',
            'core_subjects',
            'projects',
            'self_rating',
            'core_hours',
            'total_hours',
            'created_at',
        ]
        read_only_fields = ['id', 'created_at']

    def validate_date(self, value):
        request = self.context.get('request')
        user = getattr(request, 'user', None)
        if value > get_today_for_user(user):
            raise serializers.ValidationError("Date cannot be in the future.")
        return value

    def validate_core_subjects(self, value):
        cleaned = []
        for subject in value:
            name = subject.get('name', '').strip()
            if not name:
                raise serializers.ValidationError("Please fill in all core subjects correctly.")
            if subject['hours'] <= 0:
                continue
            entry = {'name': name, 'hours': subject['hours']}
            if subject.get('topics'):
                entry['topics'] = [t.strip() for t in subject['topics'] if t.strip()]
            cleaned.append(entry)
        return cleaned

    def validate_dsa_topics(self, value):
        return value.strip() or "None"

    def validate_projects(self, value):
        return value.strip() or "None"

    def create(self, validated_data):
        # core_subjects là list dict đã làm sạch, lưu thẳng vào JSONField
        return create_daily_log(self.context['request'].user, **validated_data)
