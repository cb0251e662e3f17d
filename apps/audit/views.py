from django.http import HttpResponse
from django.utils import timezone
from django.views import View
from django.views.generic import ListView

from apps.accounts.permissions import StaffRequiredMixin
from .filters import AuditLogFilter
from .models import AuditLog
from .services import write_csv


class AuditLogListView(StaffRequiredMixin, ListView):
    template_name = 'audit/audit_logs.html'
    context_object_name = 'logs'
    paginate_by = 20

    def get_queryset(self):
        self.filterset = AuditLogFilter(self.request.GET or None, queryset=AuditLog.objects.all())
        return self.filterset.qs.order_by('-created_at')

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)
        ctx['filter'] = self.filterset
        params = self.request.GET.copy()
        params.pop('page', None)
        ctx['querystring'] = params.urlencode()
        return ctx


class AuditLogExportView(StaffRequiredMixin, View):
    def get(self, request):
        filterset = AuditLogFilter(request.GET or None, queryset=AuditLog.objects.all())
        entries = filterset.qs.order_by('-created_at')
        stamp = timezone.now().strftime('%Y%m%dT%H%M%SZ')
        response = HttpResponse(content_type='text/csv')
        response['Content-Disposition'] = f'attachment; filename="spekulus-audit-logs-{stamp}.csv"'
        write_csv(entries.iterator(), response)
        return response
