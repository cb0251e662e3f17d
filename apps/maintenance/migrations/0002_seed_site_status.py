from django.db import migrations


PAGES = (
    ('/', 'Home (Landing Page)'),
    ('/dev-notes', 'Dev Notes (List)'),
    ('/dev-notes/[slug]', 'Dev Notes (Detail)'),
    ('/creators', 'Our Team (List)'),
    ('/creators/[slug]', 'Our Team (Detail)'),
    ('/coming-soon', 'Coming Soon'),
)


def seed(apps, schema_editor):
    MaintenanceSettings = apps.get_model('maintenance', 'MaintenanceSettings')
    PageStatus = apps.get_model('maintenance', 'PageStatus')

    MaintenanceSettings.objects.get_or_create(pk=1, defaults={'is_active': False})
    for path, title in PAGES:
        PageStatus.objects.get_or_create(path=path, defaults={'title': title, 'status': 'active'})


class Migration(migrations.Migration):

    dependencies = [
        ('maintenance', '0001_initial'),
    ]

    operations = [
        migrations.RunPython(seed, migrations.RunPython.noop),
    ]
