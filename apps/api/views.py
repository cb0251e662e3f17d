"""
REST endpoints backing the admin control surface.

The maintenance status endpoint is what the control page polls once its
countdown reaches zero, so it reconciles an expired window before answering.
"""

from django.utils import timezone
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import serializers, viewsets, filters, mixins
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.accounts.permissions import IsOperator
from apps.audit.filters import AuditLogFilter
from apps.audit.models import AuditLog
from apps.maintenance import gate, services
from apps.maintenance.models import MaintenanceSettings, PageStatus


class AuditLogPagination(PageNumberPagination):
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class MaintenanceStatusSerializer(serializers.ModelSerializer):
    effective_active = serializers.SerializerMethodField()
    display_message = serializers.CharField(read_only=True)
    seconds_remaining = serializers.SerializerMethodField()

    class Meta:
        model = MaintenanceSettings
        fields = [
            'is_active', 'effective_active', 'message', 'display_message',
            'ends_at', 'seconds_remaining', 'updated_at',
        ]
        read_only_fields = fields

    def _now(self):
        return self.context.get('now') or timezone.now()

    def get_effective_active(self, obj):
        return gate.effective_active(obj, self._now())

    def get_seconds_remaining(self, obj):
        return services.seconds_remaining(obj, self._now())


class PageStatusSerializer(serializers.ModelSerializer):
    is_dynamic = serializers.BooleanField(read_only=True)

    class Meta:
        model = PageStatus
        fields = ['path', 'title', 'status', 'is_dynamic', 'updated_at']
        read_only_fields = fields


class AuditLogSerializer(serializers.ModelSerializer):
    class Meta:
        model = AuditLog
        fields = [
            'id', 'created_at', 'actor', 'action', 'target', 'change_type',
            'result', 'detail', 'before', 'after', 'error',
        ]
        read_only_fields = fields


class MaintenanceStatusView(APIView):
    permission_classes = [IsOperator]
    serializer_class = MaintenanceStatusSerializer

    def get(self, request):
        now = timezone.now()
        services.reconcile_expired_maintenance(now)
        cfg = services.get_maintenance_settings()
        serializer = MaintenanceStatusSerializer(cfg, context={'request': request, 'now': now})
        return Response(serializer.data)


class PageStatusViewSet(mixins.ListModelMixin, viewsets.GenericViewSet):
    permission_classes = [IsOperator]
    serializer_class = PageStatusSerializer
    pagination_class = None

    def get_queryset(self):
        services.seed_page_statuses()
        return PageStatus.objects.all().order_by('path')


class AuditLogViewSet(viewsets.ReadOnlyModelViewSet):
    permission_classes = [IsOperator]
    serializer_class = AuditLogSerializer
    pagination_class = AuditLogPagination
    filter_backends = [DjangoFilterBackend, filters.OrderingFilter]
    filterset_class = AuditLogFilter
    ordering_fields = ['created_at', 'actor', 'action', 'result']
    ordering = ['-created_at']
    queryset = AuditLog.objects.all()
