import csv
import json
import logging
from typing import Iterable, Optional

from django.db import transaction

from .models import AuditLog

logger = logging.getLogger(__name__)

SYSTEM_ACTOR = 'system'

CSV_COLUMNS = [
    'id', 'created_at', 'actor', 'action', 'target', 'change_type',
    'result', 'detail', 'before', 'after', 'error',
]


def actor_name(user) -> str:
    if user is None or not getattr(user, 'is_authenticated', False):
        return SYSTEM_ACTOR
    return user.get_username() or SYSTEM_ACTOR


def log_action(*, actor: str, action: str, result: str, detail: str = "",
               target: str = "", change_type: str = "",
               before: Optional[dict] = None, after: Optional[dict] = None,
               error: str = "") -> Optional[AuditLog]:
    """Record an operator action. Never raises.

    The insert runs in its own savepoint so a failing audit write does not
    poison the caller's transaction.
    """
    try:
        with transaction.atomic():
            return AuditLog.objects.create(
                actor=actor or SYSTEM_ACTOR,
                action=action,
                result=result,
                detail=detail or "",
                target=target or "",
                change_type=change_type or "",
                before=before,
                after=after,
                error=error or "",
            )
    except Exception:
        logger.exception(f"Failed to write audit log entry for action '{action}' by '{actor}'")
        return None


def write_csv(entries: Iterable[AuditLog], stream) -> None:
    writer = csv.writer(stream)
    writer.writerow(CSV_COLUMNS)
    for entry in entries:
        writer.writerow([
            entry.id,
            entry.created_at.isoformat(),
            entry.actor,
            entry.action,
            entry.target,
            entry.change_type,
            entry.result,
            entry.detail,
            '' if entry.before is None else _json(entry.before),
            '' if entry.after is None else _json(entry.after),
            entry.error,
        ])


def _json(value) -> str:
    return json.dumps(value, sort_keys=True, default=str)
