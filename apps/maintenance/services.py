import logging
from datetime import datetime, timedelta
from typing import Dict, Any, List, Optional

from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils import timezone

from apps.audit.models import AuditLog
from apps.audit.services import log_action, SYSTEM_ACTOR

from . import gate
from .models import MaintenanceSettings, PageStatus
from .routes import PAGE_MANIFEST, RoutePattern, normalize_path, resolve_status

logger = logging.getLogger(__name__)


MAINTENANCE_ACTION = 'Maintenance Mode'
PAGES_ACTION = 'Pages Update'
SETTINGS_FIELDS = ('is_active', 'message', 'ends_at')

DURATION_NONE = 'none'
DURATION_CHOICES = [
    (DURATION_NONE, 'Indefinite'),
    ('15m', '15 minutes'),
    ('1h', '1 hour'),
    ('4h', '4 hours'),
    ('24h', '24 hours'),
]
DURATIONS = {
    DURATION_NONE: None,
    '15m': timedelta(minutes=15),
    '1h': timedelta(hours=1),
    '4h': timedelta(hours=4),
    '24h': timedelta(hours=24),
}


# Settings store

def get_maintenance_settings() -> MaintenanceSettings:
    return MaintenanceSettings.load()


def update_maintenance_settings(*, actor: str, changes: Dict[str, Any],
                                action: str = MAINTENANCE_ACTION, detail: str = "") -> MaintenanceSettings:
    """Merge ``changes`` onto the singleton row.

    Only the named columns are written, so a message edit cannot undo a
    concurrent activation. The outcome is audited either way; errors propagate.
    """
    unknown = set(changes) - set(SETTINGS_FIELDS)
    if unknown:
        raise ValueError(f"Unknown maintenance settings field(s): {', '.join(sorted(unknown))}")

    before = None
    try:
        with transaction.atomic():
            cfg = MaintenanceSettings.get_solo()
            before = cfg.snapshot()
            for field, value in changes.items():
                setattr(cfg, field, value)
            cfg.save(update_fields=[*changes, 'updated_at'])
    except Exception as exc:
        log_action(
            actor=actor,
            action=action,
            result=AuditLog.RESULT_FAILURE,
            detail=detail,
            target='Site-wide',
            change_type=AuditLog.CHANGE_SETTINGS,
            before=before,
            error=str(exc),
        )
        raise

    log_action(
        actor=actor,
        action=action,
        result=AuditLog.RESULT_SUCCESS,
        detail=detail,
        target='Site-wide',
        change_type=AuditLog.CHANGE_SETTINGS,
        before=before,
        after=cfg.snapshot(),
    )
    return cfg


def activate_maintenance(*, actor: str, duration: str = DURATION_NONE,
                         now: Optional[datetime] = None) -> MaintenanceSettings:
    if duration not in DURATIONS:
        raise ValidationError(f"Unsupported maintenance duration '{duration}'.")
    now = now or timezone.now()
    delta = DURATIONS[duration]
    ends_at = now + delta if delta else None
    detail = "Toggled maintenance mode to ON"
    if ends_at:
        detail += f" until {ends_at.isoformat()}"
    return update_maintenance_settings(
        actor=actor,
        changes={'is_active': True, 'ends_at': ends_at},
        detail=detail,
    )


def deactivate_maintenance(*, actor: str) -> MaintenanceSettings:
    return update_maintenance_settings(
        actor=actor,
        changes={'is_active': False, 'ends_at': None},
        detail="Toggled maintenance mode to OFF",
    )


def update_maintenance_message(*, actor: str, message: str) -> MaintenanceSettings:
    return update_maintenance_settings(
        actor=actor,
        changes={'message': (message or '').strip()},
        detail="Updated maintenance message.",
    )


def reconcile_expired_maintenance(now: Optional[datetime] = None) -> bool:
    """Clear a stored maintenance flag whose deadline has passed.

    Only display code calls this; the gate already treats an expired row as
    inactive without any write.
    """
    now = now or timezone.now()
    with transaction.atomic():
        cfg = (
            MaintenanceSettings.objects
            .select_for_update()
            .filter(pk=MaintenanceSettings.SINGLETON_PK)
            .first()
        )
        if cfg is None or not gate.is_expired(cfg, now):
            return False
        before = cfg.snapshot()
        cfg.is_active = False
        cfg.ends_at = None
        cfg.save(update_fields=['is_active', 'ends_at', 'updated_at'])

    logger.info(f"Maintenance window that ended at {before['ends_at']} cleared")
    log_action(
        actor=SYSTEM_ACTOR,
        action=MAINTENANCE_ACTION,
        result=AuditLog.RESULT_SUCCESS,
        detail="Maintenance window expired; site is live",
        target='Site-wide',
        change_type=AuditLog.CHANGE_SETTINGS,
        before=before,
        after=cfg.snapshot(),
    )
    return True


def seconds_remaining(cfg: MaintenanceSettings, now: Optional[datetime] = None) -> Optional[int]:
    now = now or timezone.now()
    if not gate.effective_active(cfg, now):
        return None
    deadline = gate.coerce_deadline(cfg.ends_at)
    if deadline is None:
        return None
    return max(int((deadline - now).total_seconds()), 0)


# Page status store

def seed_page_statuses() -> int:
    """Insert manifest routes that have no row yet. Existing rows are left alone."""
    created = 0
    for path, title in PAGE_MANIFEST:
        _, was_created = PageStatus.objects.get_or_create(path=path, defaults={'title': title})
        created += int(was_created)
    return created


def list_page_statuses() -> List[PageStatus]:
    seed_page_statuses()
    order = {path: i for i, (path, _) in enumerate(PAGE_MANIFEST)}
    rows = list(PageStatus.objects.all())
    rows.sort(key=lambda row: (order.get(row.path, len(order)), row.path))
    return rows


def get_page_status(path: str) -> Optional[str]:
    patterns = [
        RoutePattern(p, s)
        for p, s in PageStatus.objects.values_list('path', 'status')
    ]
    return resolve_status(patterns, path)


def set_page_status(*, actor: str, path: str, status: str) -> PageStatus:
    valid = {choice for choice, _ in PageStatus.STATUS_CHOICES}
    if status not in valid:
        raise ValidationError(f"Invalid page status '{status}'.")
    path = normalize_path(path)
    titles = dict(PAGE_MANIFEST)

    before = None
    try:
        with transaction.atomic():
            existing = PageStatus.objects.select_for_update().filter(path=path).first()
            before = {'status': existing.status} if existing else None
            page, _ = PageStatus.objects.update_or_create(
                path=path,
                defaults={'status': status},
                create_defaults={'status': status, 'title': titles.get(path, '')},
            )
    except Exception as exc:
        log_action(
            actor=actor,
            action=PAGES_ACTION,
            result=AuditLog.RESULT_FAILURE,
            detail=f"Failed to change status for page '{path}' to {status}.",
            target=path,
            change_type=AuditLog.CHANGE_UI_VISIBILITY,
            before=before,
            error=str(exc),
        )
        raise

    log_action(
        actor=actor,
        action=PAGES_ACTION,
        result=AuditLog.RESULT_SUCCESS,
        detail=f"Status for page '{page.title or path}' changed to {page.get_status_display()}.",
        target=path,
        change_type=AuditLog.CHANGE_UI_VISIBILITY,
        before=before,
        after={'status': status},
    )
    return page
