"""
Health endpoints for the Spekulus site.

Both live under an allow-listed prefix, so they answer even while the site
is in maintenance.
"""

import time
import logging

from django.conf import settings
from django.db import connection
from django.http import JsonResponse
from django.utils import timezone
from django.views import View

from apps.maintenance import gate
from apps.maintenance.models import MaintenanceSettings

logger = logging.getLogger(__name__)


class HealthCheckView(View):
    """Database and maintenance-settings readiness."""

    def get(self, request):
        start_time = time.time()

        health_data = {
            'status': 'healthy',
            'timestamp': timezone.now().isoformat(),
            'version': getattr(settings, 'VERSION', '1.0.0'),
            'checks': {}
        }

        # Database health check
        try:
            with connection.cursor() as cursor:
                cursor.execute("SELECT 1")
                health_data['checks']['database'] = {
                    'status': 'healthy',
                    'response_time_ms': round((time.time() - start_time) * 1000, 2)
                }
        except Exception as e:
            logger.error(f"Health check database failure: {e}")
            health_data['checks']['database'] = {
                'status': 'unhealthy',
                'error': str(e)
            }
            health_data['status'] = 'unhealthy'

        # Settings row the gate reads on every request
        try:
            cfg = MaintenanceSettings.load()
            health_data['checks']['maintenance'] = {
                'status': 'healthy',
                'maintenance_active': gate.effective_active(cfg, timezone.now()),
            }
        except Exception as e:
            logger.error(f"Health check maintenance settings failure: {e}")
            health_data['checks']['maintenance'] = {
                'status': 'unhealthy',
                'error': str(e)
            }
            health_data['status'] = 'unhealthy'

        health_data['response_time_ms'] = round((time.time() - start_time) * 1000, 2)

        status_code = 200 if health_data['status'] == 'healthy' else 503
        return JsonResponse(health_data, status=status_code)


class LivenessView(View):
    def get(self, request):
        return JsonResponse({
            'status': 'alive',
            'timestamp': timezone.now().isoformat()
        })
