from django.contrib.auth.signals import user_login_failed, user_logged_in, user_logged_out
from django.dispatch import receiver

from apps.audit.models import AuditLog
from apps.audit.services import log_action


def _client_ip(request):
    if not request:
        return '0.0.0.0'
    xff = request.META.get('HTTP_X_FORWARDED_FOR')
    if xff:
        return xff.split(',')[0].strip()
    return request.META.get('REMOTE_ADDR', '0.0.0.0')


@receiver(user_logged_in)
def on_user_logged_in(sender, request, user, **kwargs):
    log_action(
        actor=user.get_username(),
        action='Login',
        result=AuditLog.RESULT_SUCCESS,
        detail=f"Signed in from {_client_ip(request)}",
    )


@receiver(user_logged_out)
def on_user_logged_out(sender, request, user, **kwargs):
    if user is None:
        return
    log_action(
        actor=user.get_username(),
        action='Logout',
        result=AuditLog.RESULT_SUCCESS,
        detail="Signed out",
    )


@receiver(user_login_failed)
def on_user_login_failed(sender, credentials, request=None, **kwargs):
    username = ((credentials or {}).get('username') or '').strip()
    log_action(
        actor=username or 'anonymous',
        action='Login',
        result=AuditLog.RESULT_FAILURE,
        detail=f"Failed sign-in from {_client_ip(request)}",
    )
