from django.conf import settings
from django.db import models
from simple_history.models import HistoricalRecords
from auditlog.registry import auditlog


DEFAULT_MAINTENANCE_MESSAGE = "We are currently down for maintenance. Please check back soon!"


class MaintenanceSettings(models.Model):
    """
    Site-wide maintenance switch. Exactly one row exists (pk=1).

    ``is_active`` is never cleared by a timer: when ``ends_at`` has passed the
    gate treats the row as inactive even though the stored flag is still True.
    """

    SINGLETON_PK = 1

    is_active = models.BooleanField(default=False, db_index=True)
    message = models.TextField(blank=True, default=DEFAULT_MAINTENANCE_MESSAGE)
    ends_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    history = HistoricalRecords()

    class Meta:
        verbose_name = "Maintenance settings"
        verbose_name_plural = "Maintenance settings"

    def __str__(self):
        return "Maintenance settings"

    def save(self, *args, **kwargs):
        self.pk = self.SINGLETON_PK
        if self._state.adding:
            # A fresh instance saved over the stored row keeps its creation time.
            stored = (
                type(self).objects
                .filter(pk=self.SINGLETON_PK)
                .values_list('created_at', flat=True)
                .first()
            )
            if stored is not None:
                self.created_at = stored
                self._state.adding = False
        super().save(*args, **kwargs)

    @classmethod
    def get_solo(cls):
        obj, _ = cls.objects.get_or_create(pk=cls.SINGLETON_PK)
        return obj

    @classmethod
    def load(cls):
        """Read-only access: the stored row, or unsaved defaults if it is missing."""
        return cls.objects.filter(pk=cls.SINGLETON_PK).first() or cls(pk=cls.SINGLETON_PK)

    @property
    def display_message(self):
        fallback = getattr(settings, 'MAINTENANCE_DEFAULT_MESSAGE', DEFAULT_MAINTENANCE_MESSAGE)
        return (self.message or '').strip() or fallback

    def snapshot(self):
        return {
            'is_active': self.is_active,
            'message': self.message,
            'ends_at': self.ends_at.isoformat() if self.ends_at else None,
        }


class PageStatus(models.Model):
    STATUS_ACTIVE = 'active'
    STATUS_HIDDEN = 'hidden'
    STATUS_MAINTENANCE = 'maintenance'
    STATUS_CHOICES = [
        (STATUS_ACTIVE, 'Active'),
        (STATUS_HIDDEN, 'Hidden'),
        (STATUS_MAINTENANCE, 'Maintenance'),
    ]

    path = models.CharField(
        max_length=255,
        primary_key=True,
        help_text="Route pattern, e.g. /dev-notes or /dev-notes/[slug]"
    )
    title = models.CharField(max_length=255, blank=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_ACTIVE)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['path']
        verbose_name = "Page status"
        verbose_name_plural = "Page statuses"

    def __str__(self):
        return f"{self.path} ({self.status})"

    @property
    def is_dynamic(self):
        from .routes import RoutePattern
        return RoutePattern(self.path, self.status).is_dynamic


auditlog.register(MaintenanceSettings)
auditlog.register(PageStatus)
