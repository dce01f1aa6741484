import logging
from typing import Dict, Callable
from celery import shared_task
from functools import wraps

from apps.event_hub.interfaces import EventBusBackend

logger = logging.getLogger(__name__)

class CeleryBackend(EventBusBackend):
    """Celery implementation of the EventBusBackend"""

    def enqueue_task(self, listener: Callable, payload: Dict) -> None:
        """
        Enqueue a listener call as a Celery task named after the listener.
        """
        try:
            task_name = f'event.{listener.__module__}.{listener.__name__}'

            @shared_task(name=task_name)
            @wraps(listener)
            def celery_task(task_payload):
                return listener(task_payload)

            celery_task.delay(payload)
            logger.debug(f"Enqueued task {task_name} with payload {payload}")

        except Exception as e:
            self.report_error(e, {
                "listener": getattr(listener, '__name__', repr(listener)),
                "payload": payload,
                "action": "enqueue_task"
            })
            raise

    def execute_task_sync(self, listener: Callable, payload: Dict) -> None:
        """Execute the listener synchronously"""
        try:
            listener(payload)
            logger.debug(f"Executed {listener.__name__} synchronously with payload {payload}")

        except Exception as e:
            self.report_error(e, {
                "listener": getattr(listener, '__name__', repr(listener)),
                "payload": payload,
                "action": "execute_task_sync"
            })
            raise

    def report_error(self, error: Exception, context: Dict) -> None:
        logger.error(f"Error in Celery backend: {str(error)}", extra={
            "error_type": error.__class__.__name__,
            "context": context
        }, exc_info=True)
