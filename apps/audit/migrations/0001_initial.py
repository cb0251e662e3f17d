import uuid

import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='AuditLog',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('actor', models.CharField(db_index=True, max_length=150)),
                ('action', models.CharField(db_index=True, max_length=100)),
                ('target', models.CharField(blank=True, max_length=255)),
                ('change_type', models.CharField(blank=True, choices=[('SETTINGS', 'Settings'), ('UI_VISIBILITY', 'UI visibility')], max_length=20)),
                ('result', models.CharField(choices=[('Success', 'Success'), ('Failure', 'Failure')], max_length=10)),
                ('detail', models.TextField(blank=True)),
                ('before', models.JSONField(blank=True, null=True)),
                ('after', models.JSONField(blank=True, null=True)),
                ('error', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
            ],
            options={
                'verbose_name': 'Audit log entry',
                'verbose_name_plural': 'Audit log entries',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['change_type', 'created_at'], name='audit_change_created_idx'),
                    models.Index(fields=['result', 'created_at'], name='audit_result_created_idx'),
                ],
            },
        ),
    ]
