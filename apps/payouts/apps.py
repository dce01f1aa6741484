from django.apps import AppConfig


class PayoutsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.payouts"
    verbose_name = "Seller Payouts"

    def ready(self):
        from . import signals  # noqa
