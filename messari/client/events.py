"""
Synchronous publish/subscribe for client lifecycle events.
"""

from __future__ import annotations

from typing import Any

from messari.client.types import ClientEventHandler, ClientEventType
from messari.logger import Logger, LogLevel, no_op_logger


class EventEmitter:
    """Registry of ``request``/``response``/``error`` handlers.

    Registering the same handler twice for an event is a no-op. A handler
    that raises is logged at ERROR and skipped; the exception never reaches
    the code that emitted the event.
    """

    def __init__(self, logger: Logger = no_op_logger) -> None:
        self.logger = logger
        self._handlers: dict[str, dict[ClientEventHandler, None]] = {}

    def on(self, event: ClientEventType, handler: ClientEventHandler) -> None:
        self._handlers.setdefault(event, {})[handler] = None

    def off(self, event: ClientEventType, handler: ClientEventHandler) -> None:
        handlers = self._handlers.get(event)
        if handlers is not None:
            handlers.pop(handler, None)

    def handlers(self, event: ClientEventType) -> list[ClientEventHandler]:
        return list(self._handlers.get(event, ()))

    def clear(self) -> None:
        self._handlers.clear()

    def emit(self, event: ClientEventType, payload: Any) -> None:
        # Snapshot so handlers may unregister themselves while running
        for handler in self.handlers(event):
            try:
                handler(payload)
            except Exception as error:
                self.logger(LogLevel.ERROR, f"Error in {event} handler", {"error": error})
