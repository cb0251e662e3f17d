"""
Error pages for the Spekulus site.

A page hidden by the site gate reaches ``handler404`` through the same path as
a route that does not exist, so visitors cannot tell the two apart.
"""

import logging

from django.http import JsonResponse
from django.shortcuts import render
from django.views.decorators.cache import never_cache
from django.views.decorators.csrf import requires_csrf_token

logger = logging.getLogger(__name__)


def _error_response(request, status, title, message):
    if request.path.startswith('/api/'):
        return JsonResponse({
            'error': title,
            'status_code': status,
            'message': message,
        }, status=status)

    context = {
        'error_code': str(status),
        'error_title': title,
        'error_message': message,
        'show_home_link': True,
    }
    return render(request, 'errors/error.html', context, status=status)


@never_cache
@requires_csrf_token
def handler404(request, exception=None):
    logger.info(f"404 for path: {request.path}")
    return _error_response(request, 404, 'Page Not Found', 'The page you are looking for does not exist.')


@never_cache
@requires_csrf_token
def handler500(request):
    logger.error(f"500 error for path: {request.path} from IP: {request.META.get('REMOTE_ADDR')}")
    return _error_response(request, 500, 'Server Error', 'An unexpected error occurred. Please try again later.')


@never_cache
@requires_csrf_token
def handler403(request, exception=None):
    logger.warning(f"403 for path: {request.path} from IP: {request.META.get('REMOTE_ADDR')}")
    return _error_response(request, 403, 'Access Forbidden', 'You do not have permission to access this page.')


def csrf_failure(request, reason=""):
    logger.warning(f"CSRF failure for path: {request.path} - Reason: {reason}")
    return _error_response(
        request, 403, 'Security Error',
        'Security verification failed. Please refresh the page and try again.',
    )
