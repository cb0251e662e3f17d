import logging

from django.contrib import messages
from django.core.exceptions import ValidationError
from django.db import DatabaseError
from django.shortcuts import redirect
from django.urls import reverse_lazy
from django.utils import timezone
from django.views import View
from django.views.generic import TemplateView

from apps.accounts.permissions import StaffRequiredMixin
from apps.audit.services import actor_name
from . import gate, services
from .forms import MaintenanceMessageForm, MaintenanceToggleForm, PageStatusForm

logger = logging.getLogger(__name__)


class MaintenanceDashboardView(StaffRequiredMixin, TemplateView):
    template_name = 'maintenance/control.html'

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)
        services.reconcile_expired_maintenance()
        cfg = services.get_maintenance_settings()
        now = timezone.now()
        ctx.update({
            'settings': cfg,
            'effective_active': gate.effective_active(cfg, now),
            'ends_at': gate.coerce_deadline(cfg.ends_at),
            'seconds_remaining': services.seconds_remaining(cfg, now),
            'message_form': MaintenanceMessageForm(instance=cfg),
            'toggle_form': MaintenanceToggleForm(),
        })
        return ctx


class MaintenanceToggleView(StaffRequiredMixin, View):
    success_url = reverse_lazy('maintenance:control')

    def post(self, request):
        form = MaintenanceToggleForm(request.POST)
        if not form.is_valid():
            messages.error(request, "Invalid maintenance request.")
            return redirect(self.success_url)

        actor = actor_name(request.user)
        activate = form.cleaned_data['action'] == MaintenanceToggleForm.ACTION_ACTIVATE
        try:
            if activate:
                services.activate_maintenance(actor=actor, duration=form.cleaned_data['duration'])
            else:
                services.deactivate_maintenance(actor=actor)
        except (DatabaseError, ValidationError) as exc:
            logger.error(f"Maintenance toggle by {actor} failed: {exc}")
            messages.error(request, "Failed to update maintenance status.")
            return redirect(self.success_url)

        if activate:
            messages.success(request, "Maintenance mode activated. The site is now under maintenance.")
        else:
            messages.success(request, "Maintenance mode deactivated. The site is now live.")
        return redirect(self.success_url)


class MaintenanceMessageView(StaffRequiredMixin, View):
    success_url = reverse_lazy('maintenance:control')

    def post(self, request):
        form = MaintenanceMessageForm(request.POST)
        if not form.is_valid():
            messages.error(request, "Invalid maintenance message.")
            return redirect(self.success_url)

        actor = actor_name(request.user)
        try:
            services.update_maintenance_message(actor=actor, message=form.cleaned_data['message'])
        except DatabaseError as exc:
            logger.error(f"Maintenance message update by {actor} failed: {exc}")
            messages.error(request, "Failed to save message.")
        else:
            messages.success(request, "The maintenance message has been updated.")
        return redirect(self.success_url)


class PageStatusListView(StaffRequiredMixin, TemplateView):
    template_name = 'maintenance/pages.html'

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)
        rows = services.list_page_statuses()
        ctx['pages'] = [
            {
                'page': row,
                'form': PageStatusForm(initial={'path': row.path, 'status': row.status}),
                'can_preview': not row.is_dynamic,
            }
            for row in rows
        ]
        return ctx


class PageStatusUpdateView(StaffRequiredMixin, View):
    success_url = reverse_lazy('maintenance:pages')

    def post(self, request):
        form = PageStatusForm(request.POST)
        if not form.is_valid():
            messages.error(request, "Invalid page status.")
            return redirect(self.success_url)

        actor = actor_name(request.user)
        path = form.cleaned_data['path']
        try:
            page = services.set_page_status(actor=actor, path=path, status=form.cleaned_data['status'])
        except (DatabaseError, ValidationError) as exc:
            logger.error(f"Page status update for {path} by {actor} failed: {exc}")
            messages.error(request, "Could not save changes.")
        else:
            messages.success(request, f"Status for {page.title or page.path} changed to {page.get_status_display()}.")
        return redirect(self.success_url)
