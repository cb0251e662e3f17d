"""
API URL configuration for the Spekulus site.
"""

from django.urls import path, include
from rest_framework.routers import DefaultRouter
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView
from .views import MaintenanceStatusView, PageStatusViewSet, AuditLogViewSet

app_name = 'api'

router = DefaultRouter()
router.register(r'pages', PageStatusViewSet, basename='page')
router.register(r'logs', AuditLogViewSet, basename='log')

urlpatterns = [
    path('maintenance/', MaintenanceStatusView.as_view(), name='maintenance-status'),
    path('', include(router.urls)),
    path('schema/', SpectacularAPIView.as_view(), name='schema'),
    path('docs/', SpectacularSwaggerView.as_view(url_name='api:schema'), name='swagger-ui'),
]
