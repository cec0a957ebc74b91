"""
Form submission events and a priority-ordered dispatcher.

Listeners for one event run from highest to lowest priority. A listener
that calls event.stop_propagation() is the last one to see the event.
"""

import logging
from typing import Any, Callable

logger = logging.getLogger('AdminAdapters.forms.events')


class FormEvents:
    """Names of the events fired while a form binds data."""
    PRE_SUBMIT = 'form.pre_submit'
    SUBMIT = 'form.submit'
    POST_SUBMIT = 'form.post_submit'
    PRE_SET_DATA = 'form.pre_set_data'
    POST_SET_DATA = 'form.post_set_data'


class FormEvent:
    """
    Event passed to form listeners.

    Attributes:
        form: The form being bound; exposes get_data() for the current model value
        data: The value being bound (normalized submitted data on SUBMIT)
    """

    def __init__(self, form: Any, data: Any):
        self.form = form
        self.data = data
        self._propagation_stopped = False

    def get_form(self) -> Any:
        return self.form

    def get_data(self) -> Any:
        return self.data

    def set_data(self, data: Any) -> None:
        self.data = data

    def stop_propagation(self) -> None:
        """Prevent lower-priority listeners from receiving this event."""
        self._propagation_stopped = True

    def is_propagation_stopped(self) -> bool:
        return self._propagation_stopped


class FormEventDispatcher:
    """Dispatches form events to listeners in priority order."""

    def __init__(self):
        # event name -> list of (priority, registration order, listener)
        self._listeners: dict[str, list[tuple[int, int, Callable]]] = {}
        self._registered = 0

    def add_listener(self, event_name: str, listener: Callable, priority: int = 0) -> None:
        """Register a callable taking (event) for event_name."""
        self._listeners.setdefault(event_name, []).append(
            (priority, self._registered, listener)
        )
        self._registered += 1

    def add_subscriber(self, subscriber: Any) -> None:
        """
        Register every listener declared by subscriber.subscribed_events().

        Each value is a method name, a (method name, priority) tuple, or a
        list of either.

        Raises:
            ValueError: If a declaration has another shape; nothing from that
                declaration is registered
        """
        for event_name, declared in subscriber.subscribed_events().items():
            entries = declared if isinstance(declared, list) else [declared]
            parsed = [self._parse_declaration(event_name, declared, entry) for entry in entries]
            for method, priority in parsed:
                self.add_listener(event_name, getattr(subscriber, method), priority)

    @staticmethod
    def _parse_declaration(event_name: str, declared: Any, entry: Any) -> tuple[str, int]:
        if isinstance(entry, str):
            return entry, 0
        if (isinstance(entry, tuple) and 1 <= len(entry) <= 2
                and isinstance(entry[0], str)
                and (len(entry) == 1 or (isinstance(entry[1], int) and not isinstance(entry[1], bool)))):
            return entry[0], (entry[1] if len(entry) == 2 else 0)
        raise ValueError(
            f"Invalid listener declaration for {event_name!r}: {declared!r}; "
            f"use 'method', ('method', priority) or a list of those"
        )

    def get_listeners(self, event_name: str) -> list[Callable]:
        """Return listeners for event_name, highest priority first."""
        entries = sorted(
            self._listeners.get(event_name, []),
            key=lambda entry: (-entry[0], entry[1])
        )
        return [listener for _, _, listener in entries]

    def dispatch(self, event_name: str, event: FormEvent) -> FormEvent:
        """Call listeners until one stops propagation. Returns the event."""
        for listener in self.get_listeners(event_name):
            if event.is_propagation_stopped():
                break
            listener(event)
        if event.is_propagation_stopped():
            logger.debug(f"Propagation of {event_name} stopped")
        return event
