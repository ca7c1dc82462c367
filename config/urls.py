"""URL configuration for the Storefront API.

Every application router is mounted under ``/api/``; the health probe is
served from both ``/health`` and ``/api/health``.
"""
from django.contrib import admin  # type: ignore
from django.urls import path, include  # type: ignore
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView  # type: ignore

from apps.core.views import HealthView

urlpatterns = [
    path('admin/', admin.site.urls),
    path('health', HealthView.as_view(), name='health'),
    path('api/health', HealthView.as_view(), name='api-health'),
    # Application URLs
    path('api/auth/', include(('apps.users.auth_urls', 'auth'), namespace='auth')),
    path('api/users/', include('apps.users.urls')),
    path('api/addresses/', include('apps.users.address_urls')),
    path('api/', include('apps.catalog.urls')),
    path('api/cart/', include('apps.cart.urls')),
    path('api/checkout/', include('apps.orders.checkout_urls')),
    path('api/orders/', include('apps.orders.urls')),
    path('api/hotels/', include('apps.hotels.urls')),
    path('api/bookings/', include('apps.bookings.urls')),
    path('api/', include('apps.editorials.urls')),
    path('api/settings/', include('apps.site_settings.urls')),
    # API schema
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='docs'),
]
