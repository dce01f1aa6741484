import logging
from typing import Callable, Dict, List, Optional

from apps.event_hub.interfaces import EventBusBackend
from apps.event_hub.models import EventLog

logger = logging.getLogger(__name__)


def _listener_name(listener: Callable) -> str:
    return getattr(listener, '__name__', repr(listener))


class EventBus:
    """
    A simple event bus supporting synchronous and asynchronous listeners.
    Uses the singleton pattern so listeners registered at app start-up are
    visible wherever the bus is fetched.
    """
    _instance = None
    _initialized = False
    _listeners: Dict[str, List[Callable]] = {}

    def __new__(cls, backend=None):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, backend: Optional[EventBusBackend] = None):
        """Initialize the EventBus with a backend if not already initialized"""
        if not self._initialized:
            if backend is None:
                raise ValueError("Backend must be provided for EventBus initialization")
            self.backend = backend
            self._initialized = True

    def register_listener(self, event_name: str, listener: Callable) -> None:
        """
        Register a listener for a specific event.

        Args:
            event_name: The name of the event to listen for
            listener: The callback to execute with the event payload
        """
        listeners = self._listeners.setdefault(event_name, [])
        if listener in listeners:
            return
        listeners.append(listener)
        logger.debug(f"Registered listener {_listener_name(listener)} for event {event_name}")

    def emit_event(self, event_name: str, payload: Dict, is_async: bool = True) -> None:
        """
        Journal the event and hand it to every registered listener.

        Listener failures are reported through the backend and never
        propagate to the emitter.
        """
        logger.info(f"[EventBus] Emitting event {event_name} with payload {payload}")

        EventLog.objects.create(event_name=event_name, payload=payload)

        listeners = self._listeners.get(event_name, [])
        if not listeners:
            logger.warning(f"[EventBus] No listeners registered for event {event_name}")
            return

        for listener in listeners:
            try:
                if is_async:
                    logger.info(f"[EventBus] Enqueueing async task for {_listener_name(listener)}")
                    self.backend.enqueue_task(listener, payload)
                else:
                    logger.info(f"[EventBus] Executing sync task for {_listener_name(listener)}")
                    self.backend.execute_task_sync(listener, payload)
            except Exception as e:
                error_context = {
                    "event_name": event_name,
                    "listener": _listener_name(listener),
                    "payload": payload
                }
                logger.exception(f"[EventBus] Error processing event: {str(e)}", extra={"context": error_context})
                self.backend.report_error(e, error_context)

    def remove_listener(self, event_name: str, listener: Callable) -> None:
        listeners = self._listeners.get(event_name, [])
        if listener in listeners:
            listeners.remove(listener)

    def clear_listeners(self) -> None:
        """Clear all registered listeners. Useful for testing."""
        self._listeners.clear()
        logger.debug("Cleared all event listeners")
