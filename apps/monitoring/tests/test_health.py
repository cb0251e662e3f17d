from unittest import mock

from django.db import DatabaseError
from django.test import TestCase

from apps.maintenance.models import MaintenanceSettings


class HealthCheckTests(TestCase):
    def test_healthy(self):
        resp = self.client.get("/health/")
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["status"], "healthy")
        self.assertFalse(data["checks"]["maintenance"]["maintenance_active"])

    def test_reports_maintenance_without_being_gated(self):
        MaintenanceSettings.objects.filter(pk=1).update(is_active=True)
        resp = self.client.get("/health/")
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(resp.json()["checks"]["maintenance"]["maintenance_active"])

    def test_settings_failure_reports_unhealthy(self):
        with mock.patch.object(MaintenanceSettings, "load", side_effect=DatabaseError("gone")):
            with self.assertLogs("apps.monitoring.views", level="ERROR"):
                resp = self.client.get("/health/")
        self.assertEqual(resp.status_code, 503)
        self.assertEqual(resp.json()["checks"]["maintenance"]["status"], "unhealthy")

    def test_liveness(self):
        resp = self.client.get("/health/live/")
        self.assertEqual(resp.json()["status"], "alive")
