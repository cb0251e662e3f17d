from datetime import timedelta
from unittest import mock

from django.db import DatabaseError
from django.urls import reverse
from django.utils import timezone

from apps.audit.models import AuditLog
from apps.maintenance import services
from apps.maintenance.models import MaintenanceSettings, PageStatus
from tests.factories import BaseTestCase, UserFactory


class ControlSurfaceAccessTests(BaseTestCase):
    def test_anonymous_redirected_to_login(self):
        resp = self.client.get(reverse("maintenance:control"))
        self.assertRedirects(resp, f"{reverse('accounts:login')}?next={reverse('maintenance:control')}")

    def test_non_staff_forbidden(self):
        self.client.force_login(UserFactory())
        self.assertEqual(self.client.get(reverse("maintenance:control")).status_code, 403)
        resp = self.client.post(reverse("maintenance:toggle"), {"action": "activate"})
        self.assertEqual(resp.status_code, 403)
        self.assertFalse(MaintenanceSettings.get_solo().is_active)


class MaintenanceControlViewTests(BaseTestCase):
    def setUp(self):
        super().setUp()
        self.login_as_operator()

    def test_dashboard_shows_live_state(self):
        resp = self.client.get(reverse("maintenance:control"))
        self.assertContains(resp, "SITE IS LIVE")
        self.assertFalse(resp.context["effective_active"])

    def test_activate_with_duration(self):
        resp = self.client.post(
            reverse("maintenance:toggle"), {"action": "activate", "duration": "1h"}, follow=True
        )
        self.assertContains(resp, "Maintenance mode activated. The site is now under maintenance.")
        self.assertContains(resp, "MAINTENANCE ACTIVE")
        cfg = MaintenanceSettings.get_solo()
        self.assertTrue(cfg.is_active)
        self.assertIsNotNone(cfg.ends_at)
        self.assertGreater(resp.context["seconds_remaining"], 3500)

    def test_activate_defaults_to_indefinite(self):
        self.client.post(reverse("maintenance:toggle"), {"action": "activate"})
        cfg = MaintenanceSettings.get_solo()
        self.assertTrue(cfg.is_active)
        self.assertIsNone(cfg.ends_at)

    def test_invalid_duration_rejected(self):
        resp = self.client.post(
            reverse("maintenance:toggle"), {"action": "activate", "duration": "3d"}, follow=True
        )
        self.assertContains(resp, "Invalid maintenance request.")
        self.assertFalse(MaintenanceSettings.get_solo().is_active)

    def test_deactivate(self):
        self.set_maintenance(is_active=True, ends_at=timezone.now() + timedelta(hours=1))
        resp = self.client.post(reverse("maintenance:toggle"), {"action": "deactivate"}, follow=True)
        self.assertContains(resp, "Maintenance mode deactivated. The site is now live.")
        cfg = MaintenanceSettings.get_solo()
        self.assertFalse(cfg.is_active)
        self.assertIsNone(cfg.ends_at)

    def test_toggle_failure_flashes_error(self):
        with mock.patch.object(MaintenanceSettings, "save", side_effect=DatabaseError("boom")):
            resp = self.client.post(reverse("maintenance:toggle"), {"action": "activate"}, follow=True)
        self.assertContains(resp, "Failed to update maintenance status.")
        self.assertTrue(AuditLog.objects.filter(result=AuditLog.RESULT_FAILURE).exists())

    def test_save_message(self):
        resp = self.client.post(
            reverse("maintenance:message"), {"message": "Mirror firmware upgrade"}, follow=True
        )
        self.assertContains(resp, "The maintenance message has been updated.")
        self.assertEqual(MaintenanceSettings.get_solo().message, "Mirror firmware upgrade")

    def test_message_does_not_touch_activation(self):
        self.set_maintenance(is_active=True)
        self.client.post(reverse("maintenance:message"), {"message": "Still working"})
        self.assertTrue(MaintenanceSettings.get_solo().is_active)

    def test_dashboard_reconciles_expired_window(self):
        MaintenanceSettings.objects.filter(pk=1).update(
            is_active=True, ends_at=timezone.now() - timedelta(minutes=1)
        )
        resp = self.client.get(reverse("maintenance:control"))
        self.assertContains(resp, "SITE IS LIVE")
        self.assertFalse(MaintenanceSettings.get_solo().is_active)
        self.assertTrue(AuditLog.objects.filter(actor="system").exists())

    def test_actions_audited_with_operator_name(self):
        self.client.post(reverse("maintenance:toggle"), {"action": "activate"})
        entry = AuditLog.objects.filter(action=services.MAINTENANCE_ACTION).get()
        self.assertEqual(entry.actor, self.operator.username)


class PageStatusViewTests(BaseTestCase):
    def setUp(self):
        super().setUp()
        self.login_as_operator()

    def test_list_shows_manifest(self):
        resp = self.client.get(reverse("maintenance:pages"))
        self.assertContains(resp, "Dev Notes (List)")
        self.assertContains(resp, "/creators/[slug]")
        rows = {row["page"].path: row for row in resp.context["pages"]}
        self.assertTrue(rows["/creators"]["can_preview"])
        self.assertFalse(rows["/creators/[slug]"]["can_preview"])

    def test_update_status(self):
        resp = self.client.post(
            reverse("maintenance:page_update"), {"path": "/creators", "status": "hidden"}, follow=True
        )
        self.assertContains(resp, "Status for Our Team (List) changed to Hidden.")
        self.assertEqual(PageStatus.objects.get(path="/creators").status, PageStatus.STATUS_HIDDEN)
        self.assertEqual(self.client.get("/creators/").status_code, 404)

    def test_invalid_status_rejected(self):
        resp = self.client.post(
            reverse("maintenance:page_update"), {"path": "/creators", "status": "gone"}, follow=True
        )
        self.assertContains(resp, "Invalid page status.")
        self.assertEqual(PageStatus.objects.get(path="/creators").status, PageStatus.STATUS_ACTIVE)

    def test_update_failure_flashes_error(self):
        with mock.patch.object(PageStatus.objects, "update_or_create", side_effect=DatabaseError("locked")):
            resp = self.client.post(
                reverse("maintenance:page_update"), {"path": "/creators", "status": "hidden"}, follow=True
            )
        self.assertContains(resp, "Could not save changes.")
