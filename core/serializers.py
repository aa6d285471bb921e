# core/serializers.py
"""
DRF Serializers cho profile API.
"""

from django.utils import timezone
from rest_framework import serializers

from .models import UserProfile


class UserProfileSerializer(serializers.ModelSerializer):
    """
    Serializer cho đọc / upsert profile.
    target_role trả về giá trị đã áp default để frontend không phải tự xử lý.
    """
    target_role = serializers.CharField(required=False, allow_blank=True, max_length=200)
    display_name = serializers.CharField(required=False, allow_blank=True, max_length=200)
    effective_target_role = serializers.CharField(read_only=True)

    class Meta:
        model = UserProfile
        fields = [
            'branch',
            'graduation_year',
            'target_role',
            'effective_target_role',
            'display_name',
            'created_at',
        ]
        read_only_fields = ['created_at']

    def validate_branch(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Branch is required.")
        return value

    def validate_graduation_year(self, value):
        this_year = timezone.localdate().year
        if value < 1950 or value > this_year + 10:
            raise serializers.ValidationError(
                f"Graduation year must be between 1950 and {this_year + 10}."
            )
        return value
