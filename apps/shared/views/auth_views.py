"""
JWT Authentication Views - Login, Refresh, Verify, Profile

Only staff accounts can obtain tokens; the whole API is a back-office.
"""

import logging

from drf_spectacular.utils import extend_schema
from rest_framework import serializers
from rest_framework import status
from rest_framework.exceptions import AuthenticationFailed
from rest_framework.response import Response
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer
from rest_framework_simplejwt.views import TokenObtainPairView
from rest_framework_simplejwt.views import TokenRefreshView
from rest_framework_simplejwt.views import TokenVerifyView

from apps.shared.base.base_api_view import BaseAPIView

logger = logging.getLogger(__name__)


class StaffTokenObtainPairSerializer(TokenObtainPairSerializer):
    def validate(self, attrs):
        data = super().validate(attrs)
        if not self.user.is_staff:
            logger.warning(f'Token refused for non-staff user {self.user.pk}')
            raise AuthenticationFailed('Back-office access is restricted to staff accounts', code='not_staff')
        logger.info(f'Staff user {self.user.pk} logged in')
        return data


class ProfileSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    username = serializers.CharField()
    email = serializers.EmailField()
    is_superuser = serializers.BooleanField()


@extend_schema(tags=['Auth'])
class LoginView(TokenObtainPairView):
    """
    Obtain an access/refresh token pair
    POST /api/auth/login/
    """

    serializer_class = StaffTokenObtainPairSerializer


@extend_schema(tags=['Auth'])
class RefreshTokenView(TokenRefreshView):
    pass


@extend_schema(tags=['Auth'])
class ValidateTokenView(TokenVerifyView):
    pass


@extend_schema(tags=['Auth'])
class ProfileView(BaseAPIView):
    """Current staff user"""

    def get(self, request):
        return Response(ProfileSerializer(request.user).data, status=status.HTTP_200_OK)
