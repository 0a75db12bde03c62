"""URL Configuration

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/5.0/topics/http/urls/
"""

from django.contrib import admin
from django.urls import include
from django.urls import path
from drf_spectacular.views import SpectacularAPIView
from drf_spectacular.views import SpectacularRedocView
from drf_spectacular.views import SpectacularSwaggerView

urlpatterns = [
    # Admin and Documentation
    path('admin/', admin.site.urls),
    # API Documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('swagger/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
    path('redoc/', SpectacularRedocView.as_view(url_name='schema'), name='redoc'),
    # Core API Routes
    path('api/auth/', include('apps.shared.urls')),  # JWT login for staff
    path('api/events/', include('apps.events.urls')),  # Events and photos
    path('api/content/', include('apps.content.urls')),  # Public site content
    path('api/workshops/', include('apps.workshops.urls')),  # Workshops, trainers, registrations, guidelines
    path('api/contracts/', include('apps.contracts.urls')),  # Templates, assignments, client contracts
]
