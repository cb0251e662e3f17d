from django.utils import timezone
from django.utils.text import slugify
from django.views.generic import TemplateView

from apps.maintenance import gate, services as maintenance_services
from apps.maintenance.rendering import maintenance_response


class HomeView(TemplateView):
    template_name = 'landing/home.html'


class DevNoteListView(TemplateView):
    template_name = 'landing/dev_notes.html'


class DevNoteDetailView(TemplateView):
    template_name = 'landing/dev_note_detail.html'

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)
        ctx['title'] = slugify(kwargs['slug']).replace('-', ' ').title()
        return ctx


class CreatorListView(TemplateView):
    template_name = 'landing/creators.html'


class CreatorDetailView(TemplateView):
    template_name = 'landing/creator_detail.html'

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)
        ctx['name'] = slugify(kwargs['slug']).replace('-', ' ').title()
        return ctx


class ComingSoonView(TemplateView):
    template_name = 'landing/coming_soon.html'


class MaintenancePageView(TemplateView):
    """The maintenance page addressed directly; answers 200, not 503."""

    def get(self, request, *args, **kwargs):
        cfg = maintenance_services.get_maintenance_settings()
        site_wide = gate.effective_active(cfg, timezone.now())
        return maintenance_response(request, cfg, site_wide=site_wide, status=200)
