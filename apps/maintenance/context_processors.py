import logging

from django.utils import timezone

from . import gate
from .models import MaintenanceSettings

logger = logging.getLogger(__name__)


def maintenance_banner(request):
    """Expose the effective maintenance state to staff templates."""
    user = getattr(request, 'user', None)
    if not (user and user.is_authenticated and user.is_staff):
        return {}
    try:
        cfg = MaintenanceSettings.load()
    except Exception:
        logger.warning("Could not read maintenance settings for banner", exc_info=True)
        return {}
    return {
        'site_maintenance_active': gate.effective_active(cfg, timezone.now()),
        'site_maintenance_ends_at': gate.coerce_deadline(cfg.ends_at),
    }
