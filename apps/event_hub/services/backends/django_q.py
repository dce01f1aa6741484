import logging
from typing import Dict, Callable
from django_q.tasks import async_task

from apps.event_hub.interfaces import EventBusBackend

logger = logging.getLogger(__name__)


def _dotted_path(listener: Callable) -> str:
    return f"{listener.__module__}.{listener.__qualname__}"


class DjangoQBackend(EventBusBackend):
    """django-q implementation of the EventBusBackend, using the ORM broker"""

    def enqueue_task(self, listener: Callable, payload: Dict) -> None:
        try:
            task_id = async_task(_dotted_path(listener), payload, group=f"event.{listener.__name__}")
            logger.debug(f"Enqueued django-q task {task_id} for {listener.__name__}")
        except Exception as e:
            self.report_error(e, {
                "listener": getattr(listener, '__name__', repr(listener)),
                "payload": payload,
                "action": "enqueue_task"
            })
            raise

    def execute_task_sync(self, listener: Callable, payload: Dict) -> None:
        try:
            listener(payload)
        except Exception as e:
            self.report_error(e, {
                "listener": getattr(listener, '__name__', repr(listener)),
                "payload": payload,
                "action": "execute_task_sync"
            })
            raise

    def report_error(self, error: Exception, context: Dict) -> None:
        logger.error(f"Error in django-q backend: {str(error)}", extra={
            "error_type": error.__class__.__name__,
            "context": context
        }, exc_info=True)
