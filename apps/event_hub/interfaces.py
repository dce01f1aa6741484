from abc import ABC, abstractmethod
from typing import Callable, Dict
import logging

logger = logging.getLogger(__name__)

class EventBusBackend(ABC):
    """Abstract base class for EventBus backends."""

    @abstractmethod
    def enqueue_task(self, listener: Callable, payload: Dict) -> None:
        """Enqueue a listener call for asynchronous execution."""
        pass

    @abstractmethod
    def execute_task_sync(self, listener: Callable, payload: Dict) -> None:
        """Call a listener synchronously."""
        pass

    def report_error(self, error: Exception, context: Dict) -> None:
        """Report an error during task processing."""
        logger.error(f"Error in task {context}: {error}")
