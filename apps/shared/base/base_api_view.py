from rest_framework.permissions import IsAdminUser
from rest_framework.permissions import IsAuthenticated
from rest_framework.views import APIView
from rest_framework_simplejwt.authentication import JWTAuthentication


class BaseAPIView(APIView):
    """
    Base class for all back-office API views.

    - JWT-only authentication, staff users only
    - Service layer integration through get_service()

    Errors are translated by the DRF exception handler, views do not catch them.
    """

    authentication_classes = (JWTAuthentication,)
    permission_classes = [IsAuthenticated, IsAdminUser]

    def get_service(self):
        """
        Return the service used by this view.

        Raises:
            NotImplementedError: If not implemented by subclass
        """
        raise NotImplementedError('Subclasses must implement get_service()')
