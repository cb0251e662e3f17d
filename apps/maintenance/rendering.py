from django.shortcuts import render
from django.utils import timezone

from . import gate


def maintenance_response(request, cfg, *, site_wide: bool, now=None, status: int = 503):
    """Render the maintenance page in place of the requested route.

    The countdown and ``Retry-After`` only apply to site-wide maintenance with
    a deadline; a page switched to maintenance on its own has no end time.
    """
    now = now or timezone.now()
    ends_at = gate.coerce_deadline(cfg.ends_at) if site_wide else None
    context = {
        'maintenance_message': cfg.display_message,
        'maintenance_ends_at': ends_at,
        'site_wide': site_wide,
    }
    response = render(request, 'maintenance/maintenance_page.html', context, status=status)
    response['Cache-Control'] = 'no-store'
    if status == 503 and ends_at and ends_at > now:
        response['Retry-After'] = str(max(int((ends_at - now).total_seconds()), 1))
    return response
