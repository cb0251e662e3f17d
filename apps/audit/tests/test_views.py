from datetime import timedelta

from django.urls import reverse
from django.utils import timezone

from apps.audit.models import AuditLog
from tests.factories import AuditLogFactory, BaseTestCase, UserFactory


class AuditLogViewTests(BaseTestCase):
    def setUp(self):
        super().setUp()
        AuditLogFactory(actor="ana", detail="Toggled maintenance mode to ON")
        AuditLogFactory(
            actor="ben",
            action="Pages Update",
            target="/creators",
            change_type=AuditLog.CHANGE_UI_VISIBILITY,
            result=AuditLog.RESULT_FAILURE,
            detail="Failed to change status for page '/creators' to hidden.",
        )
        old = AuditLogFactory(actor="cy")
        AuditLog.objects.filter(pk=old.pk).update(created_at=timezone.now() - timedelta(days=10))

    def test_requires_operator(self):
        self.client.force_login(UserFactory())
        self.assertEqual(self.client.get(reverse("audit:logs")).status_code, 403)

    def test_lists_entries_newest_first(self):
        self.login_as_operator()
        resp = self.client.get(reverse("audit:logs"))
        self.assertEqual(resp.status_code, 200)
        actors = [entry.actor for entry in resp.context["logs"]]
        self.assertEqual(actors[-1], "cy")
        self.assertEqual(len(actors), AuditLog.objects.count())
        self.assertIn("Login", [entry.action for entry in resp.context["logs"]])

    def test_search_filter(self):
        self.login_as_operator()
        resp = self.client.get(reverse("audit:logs"), {"q": "creators"})
        self.assertEqual([entry.actor for entry in resp.context["logs"]], ["ben"])

    def test_result_filter(self):
        self.login_as_operator()
        resp = self.client.get(reverse("audit:logs"), {"result": AuditLog.RESULT_FAILURE})
        self.assertEqual([entry.actor for entry in resp.context["logs"]], ["ben"])

    def test_date_filter(self):
        self.login_as_operator()
        since = (timezone.now() - timedelta(days=1)).date().isoformat()
        resp = self.client.get(reverse("audit:logs"), {"date_from": since})
        self.assertNotIn("cy", [entry.actor for entry in resp.context["logs"]])

    def test_export_csv(self):
        self.login_as_operator()
        resp = self.client.get(reverse("audit:export"), {"change_type": AuditLog.CHANGE_UI_VISIBILITY})
        self.assertEqual(resp["Content-Type"], "text/csv")
        self.assertIn("attachment;", resp["Content-Disposition"])
        body = resp.content.decode()
        self.assertIn("ben", body)
        self.assertNotIn("ana", body)
