import apps.common.fields
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Payout',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('id', apps.common.fields.Base58UUIDv5Field(primary_key=True, serialize=False)),
                ('seller_id', models.CharField(db_index=True, max_length=64)),
                ('seller_email', models.EmailField(blank=True, max_length=254, null=True)),
                ('trade_id', models.CharField(blank=True, max_length=64, null=True)),
                ('method', models.CharField(choices=[('stripe_connect', 'Stripe Connect'), ('paypal', 'PayPal'), ('venmo', 'Venmo'), ('bank_ach', 'Bank (ACH)')], max_length=20)),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('processing', 'Processing'), ('completed', 'Completed'), ('failed', 'Failed')], db_index=True, default='pending', max_length=20)),
                ('gross_amount_cents', models.PositiveIntegerField()),
                ('platform_fee_cents', models.PositiveIntegerField(default=0)),
                ('payout_fee_cents', models.PositiveIntegerField(default=0)),
                ('net_amount_cents', models.PositiveIntegerField(default=0)),
                ('failure_reason', models.TextField(blank=True, null=True)),
                ('retry_count', models.PositiveSmallIntegerField(default=0)),
            ],
            options={
                'db_table': 'seller_payouts',
                'ordering': ['-created_at'],
            },
        ),
    ]
