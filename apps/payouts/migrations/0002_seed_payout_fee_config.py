from django.db import migrations

from apps.payouts.constants import PAYOUT_FEE_CATEGORY, PAYOUT_FEE_DEFAULTS, PAYOUT_FEE_DESCRIPTIONS


def seed_payout_fee_config(apps, schema_editor):
    AdminConfig = apps.get_model('admin_config', 'AdminConfig')
    for key, value in PAYOUT_FEE_DEFAULTS.items():
        AdminConfig.objects.get_or_create(
            key=key,
            defaults={
                'value': value,
                'description': PAYOUT_FEE_DESCRIPTIONS[key],
                'category': PAYOUT_FEE_CATEGORY,
            },
        )


def remove_payout_fee_config(apps, schema_editor):
    AdminConfig = apps.get_model('admin_config', 'AdminConfig')
    AdminConfig.objects.filter(key__in=list(PAYOUT_FEE_DEFAULTS)).delete()


class Migration(migrations.Migration):

    dependencies = [
        ('payouts', '0001_initial'),
        ('admin_config', '0001_initial'),
    ]

    operations = [
        migrations.RunPython(seed_payout_fee_config, remove_payout_fee_config),
    ]
