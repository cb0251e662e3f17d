"""
Gate evaluation for public page requests.

Decides, from the maintenance settings and the resolved page status, whether
a request may render normally, must see the maintenance page, or must look
like a missing page. Everything here is pure: callers pass the current time
and the rows they already read.
"""

import enum
import logging
from datetime import datetime
from typing import Iterable, Optional

from django.conf import settings as django_settings
from django.utils import timezone
from django.utils.dateparse import parse_datetime

from .models import PageStatus

logger = logging.getLogger(__name__)


DEFAULT_EXCLUDED_PREFIXES = (
    '/api/',
    '/admin',
    '/login',
    '/logout',
    '/health',
    '/static/',
    '/media/',
)


class GateDecision(enum.Enum):
    ALLOW = 'allow'
    SHOW_MAINTENANCE = 'maintenance'
    SHOW_HIDDEN = 'hidden'


def excluded_prefixes() -> tuple:
    return tuple(getattr(django_settings, 'MAINTENANCE_EXCLUDED_PREFIXES', DEFAULT_EXCLUDED_PREFIXES))


def is_excluded(path: str, prefixes: Optional[Iterable[str]] = None) -> bool:
    """Allow-list check on whole path segments: ``/admin`` covers ``/admin/x``
    but not ``/administrators``."""
    if prefixes is None:
        prefixes = excluded_prefixes()
    path = path or '/'
    for prefix in prefixes:
        base = prefix.rstrip('/')
        if not base:
            continue
        if path == base or path.startswith(base + '/'):
            return True
    return False


def coerce_deadline(value) -> Optional[datetime]:
    """Turn a stored ``ends_at`` into an aware datetime.

    Anything unusable is read as "no deadline" so a bad value can never crash
    the gate.
    """
    if value is None or value == '':
        return None
    if isinstance(value, str):
        try:
            parsed = parse_datetime(value)
        except ValueError:
            parsed = None
        if parsed is None:
            logger.warning(f"Ignoring malformed maintenance deadline {value!r}")
            return None
        value = parsed
    if not isinstance(value, datetime):
        logger.warning(f"Ignoring maintenance deadline of type {type(value).__name__}")
        return None
    if timezone.is_naive(value):
        value = timezone.make_aware(value)
    return value


def effective_active(settings, now: datetime) -> bool:
    if not getattr(settings, 'is_active', False):
        return False
    deadline = coerce_deadline(getattr(settings, 'ends_at', None))
    return deadline is None or deadline > now


def is_expired(settings, now: datetime) -> bool:
    """True when the stored flag is still on but its deadline has passed."""
    if not getattr(settings, 'is_active', False):
        return False
    deadline = coerce_deadline(getattr(settings, 'ends_at', None))
    return deadline is not None and deadline <= now


def evaluate(settings, page_status: Optional[str], path: str, now: datetime,
             excluded: Optional[Iterable[str]] = None) -> GateDecision:
    if is_excluded(path, excluded):
        return GateDecision.ALLOW

    # Global maintenance beats any per-page status.
    if effective_active(settings, now):
        return GateDecision.SHOW_MAINTENANCE

    if page_status == PageStatus.STATUS_MAINTENANCE:
        return GateDecision.SHOW_MAINTENANCE
    if page_status == PageStatus.STATUS_HIDDEN:
        return GateDecision.SHOW_HIDDEN
    return GateDecision.ALLOW
