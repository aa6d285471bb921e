"""
URL patterns cho readiness API.
"""

from django.urls import path
from . import views

app_name = 'readiness'

urlpatterns = [
    # POST - Chạy phân tích AI cho user hiện tại
    path('analyze/', views.AnalyzeReadinessView.as_view(), name='analyze'),
]
