"""
Process-wide event registry.

HTTP clients publish lifecycle events here; integrations subscribe to them
with handler functions. Handlers are keyed by a stable identifier, so
attaching the same id twice replaces the previous registration instead of
adding a second one.

Example:
    >>> from http_client_telemetry import telemetry
    >>>
    >>> def on_stop(event, measurements, metadata, config):
    ...     print(event, measurements["duration"])
    >>>
    >>> telemetry.attach("my-app.on-stop", ("http_client", "request", "stop"), on_stop)
    >>> telemetry.execute(("http_client", "request", "stop"), {"duration": 10}, {})
    ('http_client', 'request', 'stop') 10
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Hashable, Iterable, List, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

EventName = Tuple[str, ...]
HandlerFunction = Callable[[EventName, Mapping[str, Any], Mapping[str, Any], Any], None]


@dataclass(frozen=True)
class Handler:
    """
    Registered event handler.

    Attributes:
        handler_id: Stable identifier (string or tuple)
        event_name: Event the handler is attached to
        function: Callable invoked as function(event, measurements, metadata, config)
        config: Handler-local configuration passed back on every call
    """

    handler_id: Hashable
    event_name: EventName
    function: HandlerFunction
    config: Any = field(default=None, compare=False)


# handler_id -> list of Handler (one per event for attach_many)
_handlers: Dict[Hashable, List[Handler]] = {}
_lock = threading.Lock()


def _normalize_event(event_name: Iterable[str]) -> EventName:
    event = tuple(event_name)
    if not event or not all(isinstance(part, str) for part in event):
        raise ValueError(f"Event name must be a non-empty tuple of strings, got {event_name!r}")
    return event


def attach(
    handler_id: Hashable,
    event_name: Iterable[str],
    function: HandlerFunction,
    config: Any = None,
) -> None:
    """
    Attach a handler to a single event.

    Re-attaching an existing handler_id replaces the old registration.

    Args:
        handler_id: Stable identifier for the registration
        event_name: Event name, e.g. ("http_client", "request", "stop")
        function: Handler callable
        config: Handler-local configuration
    """
    attach_many(handler_id, [event_name], function, config)


def attach_many(
    handler_id: Hashable,
    event_names: Iterable[Iterable[str]],
    function: HandlerFunction,
    config: Any = None,
) -> None:
    """Attach one handler to several events under a single handler_id."""
    if not callable(function):
        raise TypeError(f"Handler function must be callable, got {function!r}")

    handlers = [
        Handler(handler_id, _normalize_event(name), function, config)
        for name in event_names
    ]

    with _lock:
        replaced = handler_id in _handlers
        # Re-insert so a replaced handler keeps a deterministic position at the end
        _handlers.pop(handler_id, None)
        _handlers[handler_id] = handlers

    logger.debug(
        "Handler %s %s for %s",
        handler_id,
        "replaced" if replaced else "attached",
        [h.event_name for h in handlers],
    )


def detach(handler_id: Hashable) -> bool:
    """
    Detach a handler.

    Returns:
        True if a handler with this id was registered
    """
    with _lock:
        removed = _handlers.pop(handler_id, None)

    if removed is not None:
        logger.debug("Handler %s detached", handler_id)
    return removed is not None


def list_handlers(event_prefix: Iterable[str] = ()) -> List[Handler]:
    """List handlers whose event name starts with event_prefix."""
    prefix = tuple(event_prefix)
    with _lock:
        snapshot = [h for handlers in _handlers.values() for h in handlers]
    return [h for h in snapshot if h.event_name[:len(prefix)] == prefix]


def execute(
    event_name: Iterable[str],
    measurements: Mapping[str, Any],
    metadata: Mapping[str, Any],
) -> None:
    """
    Dispatch an event to every handler attached to it.

    Handlers run synchronously, in attach order, on the calling thread.
    A handler that raises is detached and the error is logged; the caller
    never sees it.
    """
    event = tuple(event_name)

    with _lock:
        targets = [
            h for handlers in _handlers.values() for h in handlers
            if h.event_name == event
        ]

    for handler in targets:
        try:
            handler.function(event, measurements, metadata, handler.config)
        except Exception:
            logger.exception(
                "Handler %s failed on event %s and has been detached",
                handler.handler_id,
                event,
            )
            _detach_failed(handler)


def _detach_failed(handler: Handler) -> None:
    with _lock:
        current = _handlers.get(handler.handler_id)
        # Only drop the registration that failed, not a newer one under the same id
        if current is not None and any(h is handler for h in current):
            del _handlers[handler.handler_id]


def reset() -> None:
    """Detach all handlers."""
    with _lock:
        _handlers.clear()


__all__ = [
    "EventName",
    "Handler",
    "HandlerFunction",
    "attach",
    "attach_many",
    "detach",
    "execute",
    "list_handlers",
    "reset",
]
