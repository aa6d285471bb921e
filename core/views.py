# core/views.py
from django.http import JsonResponse
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from .models import UserProfile
from .serializers import UserProfileSerializer
from .services import upsert_user_profile


def health(request):
    return JsonResponse({"status": "ok"})


class ProfileView(APIView):
    """
    GET  /api/profile/  -> profile hiện tại (404 nếu chưa setup)
    PUT  /api/profile/  -> tạo mới hoặc cập nhật profile
    POST /api/profile/  -> giống PUT (form Profile Setup gửi POST)
    """
    permission_classes = [IsAuthenticated]

    def get(self, request):
        profile = UserProfile.objects.filter(user=request.user).first()
        if profile is None:
            return Response({
                'success': False,
                'error': 'profile_missing',
                'message': 'User profile not found. Please complete your profile first.',
            }, status=status.HTTP_404_NOT_FOUND)
        return Response(UserProfileSerializer(profile).data)

    def put(self, request):
        serializer = UserProfileSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        profile, created = upsert_user_profile(
            request.user,
            branch=data['branch'],
            graduation_year=data['graduation_year'],
            target_role=data.get('target_role', '').strip(),
            display_name=data.get('display_name', '').strip(),
        )
        return Response(
            UserProfileSerializer(profile).data,
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
        )

    def post(self, request):
        return self.put(request)
