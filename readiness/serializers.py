# readiness/serializers.py
"""
DRF Serializers cho response của readiness API.
"""

from rest_framework import serializers


class ActionPlanSerializer(serializers.Serializer):
    days_1_to_3 = serializers.CharField()
    days_4_to_5 = serializers.CharField()
    days_6_to_7 = serializers.CharField()


class ReadinessReportSerializer(serializers.Serializer):
    """
    readiness_score dùng ReadOnlyField để trả nguyên giá trị model sinh ra.
    """
    consistency_analysis = serializers.CharField()
    weak_areas = serializers.ListField(child=serializers.CharField())
    strengths = serializers.ListField(child=serializers.CharField())
    action_plan = ActionPlanSerializer()
    readiness_score = serializers.ReadOnlyField()
