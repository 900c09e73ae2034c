"""URL configuration for the venue booking project.

The `urlpatterns` list routes URLs to views. It includes both Django admin
and application‑level routers provided by Django Rest Framework and each app.
"""
import structlog
from django.contrib import admin  # type: ignore
from django.db import DatabaseError, connection  # type: ignore
from django.http import JsonResponse  # type: ignore
from django.urls import path, include  # type: ignore
from drf_spectacular.views import SpectacularAPIView  # type: ignore
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView  # type: ignore


logger = structlog.get_logger(__name__)


def health(request):
    """Liveness probe; also checks the database answers."""
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
    except DatabaseError as exc:
        logger.error("health.fail", error=str(exc))
        return JsonResponse({"status": "unhealthy", "database": "unavailable"}, status=503)
    return JsonResponse({"status": "OK", "service": "venue-booking", "database": "connected"})


# API versioning. v1 is our initial version; future versions can be added here.

urlpatterns = [
    path('admin/', admin.site.urls),
    path('health/', health, name='health'),
    path('api/v1/schema/', SpectacularAPIView.as_view(), name='schema'),
    # Staff authentication for the administrative endpoints
    path('api/v1/auth/token/', TokenObtainPairView.as_view(), name='token-obtain'),
    path('api/v1/auth/token/refresh/', TokenRefreshView.as_view(), name='token-refresh'),
    # Application URLs
    path('api/v1/venues/', include('apps.venues.urls')),
    path('api/v1/bookings/', include('apps.bookings.urls')),
    path('api/v1/admin/', include(('apps.bookings.admin_urls', 'booking-admin'), namespace='booking-admin')),
]
