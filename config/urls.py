"""
URL configuration for the iHost API project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/4.2/topics/http/urls/
"""
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from config.views import health_check

urlpatterns = [
    # Health check (public, used by the hosting platform and the app splash screen)
    path('health', health_check, name='health-check'),

    # API Documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='api-schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='api-schema'), name='api-docs'),

    # API endpoints
    # Each app owns its resource prefix; routes carry no trailing slash
    path('api/', include('apps.accounts.urls')),
    path('api/', include('apps.events.urls')),
    path('api/', include('apps.friendships.urls')),
    path('api/', include('apps.images.urls')),
    path('api/', include('apps.payments.urls')),
]


# Custom error handlers
handler404 = 'config.views.error_404'
handler500 = 'config.views.error_500'
