import logging

from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger(__name__)


class EventHubConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.event_hub'
    verbose_name = 'Event Hub'

    def ready(self):
        """
        Create the event bus and import listener modules so they register.
        """
        try:
            from apps.event_hub.services.factory import get_event_bus

            get_event_bus()

            from apps.payouts.listeners import fee_config_listeners  # noqa

            if settings.EVENT_BUS.get('LOGGING_ENABLED', False):
                logger.info("Event Hub initialized successfully")

        except Exception as e:
            logger.error(f"Failed to initialize Event Hub: {str(e)}")
            raise
