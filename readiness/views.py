# readiness/views.py
"""
API Views cho readiness analysis.
Sử dụng Django Rest Framework.
"""
import logging

from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from .exceptions import (
    AuthRejectedError,
    ConfigurationError,
    DataUnavailableError,
    ProvidersUnavailableError,
)
from .serializers import ReadinessReportSerializer
from .services import ReadinessAdvisor

logger = logging.getLogger(__name__)


class AnalyzeReadinessView(APIView):
    """
    POST /api/readiness/analyze/

    Phân tích 14 log gần nhất của user bằng AI.

    Success Response (200):
    {
        "consistency_analysis": "...",
        "weak_areas": ["..."],
        "strengths": ["..."],
        "action_plan": {"days_1_to_3": "...", "days_4_to_5": "...", "days_6_to_7": "..."},
        "readiness_score": 72
    }

    Error Response:
    {
        "success": false,
        "error": "no_logs",
        "message": "No daily logs found. Please add some preparation logs first."
    }
    """
    permission_classes = [IsAuthenticated]

    def post(self, request):
        try:
            advisor = ReadinessAdvisor.from_settings()
            report = advisor.analyze(request.user.id)

        except ConfigurationError as e:
            logger.error("Readiness advisor misconfigured: %s", e)
            return self._error('configuration_error', e, status.HTTP_503_SERVICE_UNAVAILABLE)

        except DataUnavailableError as e:
            return self._error(e.code, e, status.HTTP_400_BAD_REQUEST)

        except AuthRejectedError as e:
            return Response({
                'success': False,
                'error': 'auth_rejected',
                'message': f"API key error: {e.detail}. Please verify your Gemini API key in the .env file.",
            }, status=status.HTTP_502_BAD_GATEWAY)

        except ProvidersUnavailableError as e:
            logger.error("Readiness analysis failed: %s", e)
            return self._error('providers_unavailable', e, status.HTTP_503_SERVICE_UNAVAILABLE)

        return Response(ReadinessReportSerializer(report).data)

    def _error(self, code, exc, http_status):
        return Response({
            'success': False,
            'error': code,
            'message': str(exc),
        }, status=http_status)
