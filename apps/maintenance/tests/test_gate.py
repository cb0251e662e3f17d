from datetime import timedelta
from types import SimpleNamespace

from django.test import SimpleTestCase, override_settings
from django.utils import timezone

from apps.maintenance import gate
from apps.maintenance.gate import GateDecision
from apps.maintenance.models import PageStatus


def make_settings(is_active=False, ends_at=None):
    return SimpleNamespace(is_active=is_active, ends_at=ends_at, message="")


class ExcludedPrefixTests(SimpleTestCase):
    def test_prefix_matches_whole_segments(self):
        self.assertTrue(gate.is_excluded('/admin'))
        self.assertTrue(gate.is_excluded('/admin/pages/'))
        self.assertTrue(gate.is_excluded('/api/maintenance/'))
        self.assertFalse(gate.is_excluded('/administrators'))
        self.assertFalse(gate.is_excluded('/apiary'))

    def test_public_routes_not_excluded(self):
        for path in ('/', '/dev-notes/', '/creators/ada/', '/coming-soon/'):
            self.assertFalse(gate.is_excluded(path), path)

    @override_settings(MAINTENANCE_EXCLUDED_PREFIXES=('/status',))
    def test_prefixes_come_from_settings(self):
        self.assertTrue(gate.is_excluded('/status/ping'))
        self.assertFalse(gate.is_excluded('/admin'))


class DeadlineTests(SimpleTestCase):
    def setUp(self):
        self.now = timezone.now()

    def test_no_deadline_stays_active(self):
        self.assertTrue(gate.effective_active(make_settings(True), self.now))

    def test_future_deadline_active(self):
        cfg = make_settings(True, self.now + timedelta(minutes=5))
        self.assertTrue(gate.effective_active(cfg, self.now))
        self.assertFalse(gate.is_expired(cfg, self.now))

    def test_deadline_equal_to_now_is_expired(self):
        cfg = make_settings(True, self.now)
        self.assertFalse(gate.effective_active(cfg, self.now))
        self.assertTrue(gate.is_expired(cfg, self.now))

    def test_inactive_never_expired(self):
        cfg = make_settings(False, self.now - timedelta(hours=1))
        self.assertFalse(gate.effective_active(cfg, self.now))
        self.assertFalse(gate.is_expired(cfg, self.now))

    def test_malformed_deadline_means_no_expiry(self):
        cfg = make_settings(True, "not-a-date")
        with self.assertLogs('apps.maintenance.gate', level='WARNING'):
            self.assertTrue(gate.effective_active(cfg, self.now))

    def test_string_deadline_parsed(self):
        past = (self.now - timedelta(minutes=1)).isoformat()
        self.assertFalse(gate.effective_active(make_settings(True, past), self.now))


class EvaluateTests(SimpleTestCase):
    def setUp(self):
        self.now = timezone.now()

    def test_live_site_active_page(self):
        decision = gate.evaluate(make_settings(), PageStatus.STATUS_ACTIVE, '/', self.now)
        self.assertIs(decision, GateDecision.ALLOW)

    def test_unlisted_page_allowed(self):
        self.assertIs(gate.evaluate(make_settings(), None, '/anything', self.now), GateDecision.ALLOW)

    def test_global_maintenance(self):
        decision = gate.evaluate(make_settings(True), None, '/', self.now)
        self.assertIs(decision, GateDecision.SHOW_MAINTENANCE)

    def test_global_maintenance_beats_hidden(self):
        decision = gate.evaluate(make_settings(True), PageStatus.STATUS_HIDDEN, '/creators', self.now)
        self.assertIs(decision, GateDecision.SHOW_MAINTENANCE)

    def test_page_maintenance(self):
        decision = gate.evaluate(make_settings(), PageStatus.STATUS_MAINTENANCE, '/creators', self.now)
        self.assertIs(decision, GateDecision.SHOW_MAINTENANCE)

    def test_hidden_page(self):
        decision = gate.evaluate(make_settings(), PageStatus.STATUS_HIDDEN, '/dev-notes', self.now)
        self.assertIs(decision, GateDecision.SHOW_HIDDEN)

    def test_excluded_path_ignores_maintenance(self):
        decision = gate.evaluate(make_settings(True), PageStatus.STATUS_HIDDEN, '/admin/pages/', self.now)
        self.assertIs(decision, GateDecision.ALLOW)

    def test_expired_window_allows(self):
        cfg = make_settings(True, self.now - timedelta(seconds=1))
        self.assertIs(gate.evaluate(cfg, None, '/', self.now), GateDecision.ALLOW)

    def test_same_inputs_same_decision(self):
        cfg = make_settings(False)
        first = gate.evaluate(cfg, PageStatus.STATUS_HIDDEN, '/dev-notes', self.now)
        second = gate.evaluate(cfg, PageStatus.STATUS_HIDDEN, '/dev-notes', self.now)
        self.assertIs(first, second)
        self.assertEqual(cfg.is_active, False)
