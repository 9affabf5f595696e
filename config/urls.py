"""
URL configuration for the Plot Sales project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/4.2/topics/http/urls/

API routes accept paths with or without a trailing slash, so clients
calling `/api/customers` never hit an APPEND_SLASH redirect.
"""
from django.contrib import admin
from django.urls import path, include, re_path
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from config.views import serve_frontend, health_check, api_not_found

urlpatterns = [
    # Health check
    re_path(r'^api/health/?$', health_check, name='health-check'),

    # Admin
    path('admin/', admin.site.urls),

    # API Documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='api-schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='api-schema'), name='api-docs'),

    # API endpoints (each app owns its path below /api/)
    path('api/', include('apps.accounts.urls')),
    path('api/', include('apps.plots.urls')),
    path('api/', include('apps.bookings.urls')),
    path('api/', include('apps.mediators.urls')),

    # Anything else under /api is a JSON 404
    re_path(r'^api(?:/.*)?/?$', api_not_found, name='api-not-found'),

    # Single page frontend for every other route
    re_path(r'^(?!api(?:/|$)|static/).*$', serve_frontend, name='frontend'),
]


# Custom error handlers
handler404 = 'config.views.error_404'
handler500 = 'config.views.error_500'
