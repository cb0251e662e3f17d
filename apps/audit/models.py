import uuid

from django.db import models
from django.utils import timezone


class AuditLog(models.Model):
    """Operator action trail for the admin control surface."""

    RESULT_SUCCESS = 'Success'
    RESULT_FAILURE = 'Failure'
    RESULT_CHOICES = [
        (RESULT_SUCCESS, 'Success'),
        (RESULT_FAILURE, 'Failure'),
    ]

    CHANGE_SETTINGS = 'SETTINGS'
    CHANGE_UI_VISIBILITY = 'UI_VISIBILITY'
    CHANGE_TYPE_CHOICES = [
        (CHANGE_SETTINGS, 'Settings'),
        (CHANGE_UI_VISIBILITY, 'UI visibility'),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    actor = models.CharField(max_length=150, db_index=True)
    action = models.CharField(max_length=100, db_index=True)
    target = models.CharField(max_length=255, blank=True)
    change_type = models.CharField(max_length=20, choices=CHANGE_TYPE_CHOICES, blank=True)
    result = models.CharField(max_length=10, choices=RESULT_CHOICES)
    detail = models.TextField(blank=True)
    before = models.JSONField(null=True, blank=True)
    after = models.JSONField(null=True, blank=True)
    error = models.TextField(blank=True)
    created_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['change_type', 'created_at'], name='audit_change_created_idx'),
            models.Index(fields=['result', 'created_at'], name='audit_result_created_idx'),
        ]
        verbose_name = 'Audit log entry'
        verbose_name_plural = 'Audit log entries'

    def __str__(self):
        return f"{self.created_at:%Y-%m-%d %H:%M} {self.actor}: {self.action} ({self.result})"
