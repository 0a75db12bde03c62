from django.urls import path

from .views.auth_views import LoginView
from .views.auth_views import ProfileView
from .views.auth_views import RefreshTokenView
from .views.auth_views import ValidateTokenView

app_name = 'shared'

urlpatterns = [
    path('login/', LoginView.as_view(), name='login'),  # POST
    path('refresh/', RefreshTokenView.as_view(), name='refresh'),  # POST
    path('validate/', ValidateTokenView.as_view(), name='validate'),  # POST
    path('profile/', ProfileView.as_view(), name='profile'),  # GET
]
