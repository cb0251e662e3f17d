import django_filters
from django.db.models import Q

from .models import AuditLog


class AuditLogFilter(django_filters.FilterSet):
    q = django_filters.CharFilter(method='filter_q', label='Search')
    change_type = django_filters.ChoiceFilter(choices=AuditLog.CHANGE_TYPE_CHOICES)
    result = django_filters.ChoiceFilter(choices=AuditLog.RESULT_CHOICES)
    date_from = django_filters.DateFilter(field_name='created_at', lookup_expr='date__gte')
    date_to = django_filters.DateFilter(field_name='created_at', lookup_expr='date__lte')

    class Meta:
        model = AuditLog
        fields = ['q', 'change_type', 'result', 'date_from', 'date_to']

    def filter_q(self, queryset, name, value):
        value = (value or '').strip()
        if not value:
            return queryset
        return queryset.filter(
            Q(actor__icontains=value)
            | Q(action__icontains=value)
            | Q(target__icontains=value)
            | Q(detail__icontains=value)
        )
