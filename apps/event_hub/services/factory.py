from django.conf import settings
from django.utils.module_loading import import_string
from .event_bus import EventBus


def get_event_bus() -> EventBus:
    """
    Return the process-wide EventBus, creating it with the backend named in
    settings.EVENT_BUS['BACKEND'] on first use.
    """
    if EventBus._initialized:
        return EventBus()

    try:
        backend_class = import_string(settings.EVENT_BUS['BACKEND'])
    except (AttributeError, KeyError, ImportError) as e:
        raise ValueError(
            f"Invalid EVENT_BUS configuration. Please check your settings: {str(e)}"
        )
    return EventBus(backend=backend_class())
