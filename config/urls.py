"""
URL configuration for the Spekulus website.

Everything under /admin, /api/, /login, /logout and /health is on the site
gate's allow-list; every other route is subject to maintenance and page
status checks.
"""
from django.contrib import admin
from django.urls import path, include
from django.conf import settings

urlpatterns = [
    # Django admin (raw model access)
    path('admin/db/', admin.site.urls),

    # Admin control surface
    path('admin/logs/', include(('apps.audit.urls', 'audit'), namespace='audit')),
    path('admin/', include(('apps.maintenance.urls', 'maintenance'), namespace='maintenance')),

    # Authentication
    path('', include(('apps.accounts.urls', 'accounts'), namespace='accounts')),

    # API endpoints
    path('api/', include('apps.api.urls')),

    # Health monitoring
    path('health/', include('apps.monitoring.urls')),

    # Public site
    path('', include(('apps.landing.urls', 'landing'), namespace='landing')),
]

if settings.DEBUG and 'debug_toolbar' in settings.INSTALLED_APPS:
    import debug_toolbar
    urlpatterns = [
        path('__debug__/', include(debug_toolbar.urls)),
    ] + urlpatterns

# Custom error handlers
handler404 = 'apps.core.error_handlers.handler404'
handler500 = 'apps.core.error_handlers.handler500'
handler403 = 'apps.core.error_handlers.handler403'
