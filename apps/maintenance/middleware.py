import logging

from django.http import Http404
from django.middleware.common import CommonMiddleware
from django.utils import timezone
from django.utils.deprecation import MiddlewareMixin

from . import gate, services
from .rendering import maintenance_response

logger = logging.getLogger(__name__)


def gate_request(request):
    """Evaluate the gate for ``request`` once and remember the outcome.

    Returns ``(decision, settings, now)``. A failing settings/page-status read
    yields ``ALLOW`` with no settings.
    """
    cached = getattr(request, '_site_gate', None)
    if cached is not None:
        return cached

    path = request.path_info or '/'
    now = timezone.now()
    result = (gate.GateDecision.ALLOW, None, now)
    if not gate.is_excluded(path):
        try:
            cfg = services.get_maintenance_settings()
            page_status = None
            if not gate.effective_active(cfg, now):
                page_status = services.get_page_status(path)
        except Exception:
            logger.warning(f"Site gate lookup failed for path {path}; allowing request", exc_info=True)
        else:
            result = (gate.evaluate(cfg, page_status, path, now), cfg, now)

    request._site_gate = result
    return result


class SiteGateMiddleware(MiddlewareMixin):
    """
    Gate every public page request on maintenance settings and page status.

    Global maintenance and pages marked ``maintenance`` get the maintenance
    page (HTTP 503, URL unchanged). Hidden pages get the regular 404 handler.
    Allow-listed prefixes (API, admin, login, health, static) are never
    checked, so operators can always reach the control surface.

    A failing settings/page-status read lets the request through.
    """

    def process_request(self, request):
        decision, cfg, now = gate_request(request)
        if decision is gate.GateDecision.ALLOW:
            return None

        if decision is gate.GateDecision.SHOW_HIDDEN:
            raise Http404("Page not found")

        return maintenance_response(
            request,
            cfg,
            site_wide=gate.effective_active(cfg, now),
            now=now,
        )


class GateAwareCommonMiddleware(CommonMiddleware):
    """
    ``CommonMiddleware`` that never slash-redirects a page the gate hides.

    Otherwise ``/dev-notes`` would answer 301 to ``/dev-notes/`` while a
    missing route answers 404, which gives the hidden page away.
    """

    def should_redirect_with_slash(self, request):
        if not super().should_redirect_with_slash(request):
            return False
        decision, _, _ = gate_request(request)
        return decision is not gate.GateDecision.SHOW_HIDDEN
