"""Tests for FormEvent and FormEventDispatcher."""
from unittest.mock import MagicMock

import pytest

from forms.events import FormEvent, FormEventDispatcher, FormEvents


class TestFormEvent:
    """Tests for FormEvent state."""

    def test_exposes_form_and_data(self):
        form = MagicMock()
        event = FormEvent(form, [1, 2])
        assert event.get_form() is form
        assert event.get_data() == [1, 2]

    def test_set_data_replaces_data(self):
        event = FormEvent(MagicMock(), 'old')
        event.set_data('new')
        assert event.data == 'new'

    def test_propagation_initially_running(self):
        assert FormEvent(MagicMock(), None).is_propagation_stopped() is False

    def test_stop_propagation(self):
        event = FormEvent(MagicMock(), None)
        event.stop_propagation()
        assert event.is_propagation_stopped() is True


class TestFormEventDispatcher:
    """Tests for priority ordering and propagation stop."""

    def test_dispatch_without_listeners_returns_event(self):
        event = FormEvent(MagicMock(), 'x')
        assert FormEventDispatcher().dispatch(FormEvents.SUBMIT, event) is event

    def test_listeners_run_highest_priority_first(self):
        """Higher priority runs first; ties keep registration order."""
        calls = []
        dispatcher = FormEventDispatcher()
        dispatcher.add_listener(FormEvents.SUBMIT, lambda e: calls.append('low'), priority=-5)
        dispatcher.add_listener(FormEvents.SUBMIT, lambda e: calls.append('first0'))
        dispatcher.add_listener(FormEvents.SUBMIT, lambda e: calls.append('high'), priority=10)
        dispatcher.add_listener(FormEvents.SUBMIT, lambda e: calls.append('second0'))

        dispatcher.dispatch(FormEvents.SUBMIT, FormEvent(MagicMock(), None))

        assert calls == ['high', 'first0', 'second0', 'low']

    def test_stop_propagation_skips_remaining(self):
        calls = []

        def stopper(event):
            calls.append('stopper')
            event.stop_propagation()

        dispatcher = FormEventDispatcher()
        dispatcher.add_listener(FormEvents.SUBMIT, stopper, priority=1)
        dispatcher.add_listener(FormEvents.SUBMIT, lambda e: calls.append('skipped'))

        event = dispatcher.dispatch(FormEvents.SUBMIT, FormEvent(MagicMock(), None))

        assert calls == ['stopper']
        assert event.is_propagation_stopped() is True

    def test_listeners_scoped_to_event_name(self):
        calls = []
        dispatcher = FormEventDispatcher()
        dispatcher.add_listener(FormEvents.PRE_SUBMIT, lambda e: calls.append('pre'))

        dispatcher.dispatch(FormEvents.SUBMIT, FormEvent(MagicMock(), None))

        assert calls == []

    def test_add_subscriber_accepts_all_declaration_forms(self):
        """Method name, (name, priority) and lists are all accepted."""
        class Subscriber:
            def __init__(self):
                self.calls = []

            def subscribed_events(self):
                return {
                    FormEvents.PRE_SUBMIT: 'on_pre',
                    FormEvents.SUBMIT: ('on_submit', 5),
                    FormEvents.POST_SUBMIT: [('on_post_a', 1), ('on_post_b',)],
                }

            def on_pre(self, event):
                self.calls.append('pre')

            def on_submit(self, event):
                self.calls.append('submit')

            def on_post_a(self, event):
                self.calls.append('post_a')

            def on_post_b(self, event):
                self.calls.append('post_b')

        subscriber = Subscriber()
        dispatcher = FormEventDispatcher()
        dispatcher.add_subscriber(subscriber)

        for name in (FormEvents.PRE_SUBMIT, FormEvents.SUBMIT, FormEvents.POST_SUBMIT):
            dispatcher.dispatch(name, FormEvent(MagicMock(), None))

        assert subscriber.calls == ['pre', 'submit', 'post_a', 'post_b']
        assert dispatcher.get_listeners(FormEvents.POST_SUBMIT) == [
            subscriber.on_post_a, subscriber.on_post_b
        ]

    @pytest.mark.parametrize("declared", [
        ['on_submit', 10],
        ('on_submit', 10, 'extra'),
        ('on_submit', 'high'),
        (),
        10,
    ])
    def test_add_subscriber_rejects_malformed_declaration(self, declared):
        """A malformed declaration raises and registers nothing for that event."""
        subscriber = MagicMock()
        subscriber.subscribed_events.return_value = {FormEvents.SUBMIT: declared}
        dispatcher = FormEventDispatcher()

        with pytest.raises(ValueError, match="form.submit"):
            dispatcher.add_subscriber(subscriber)

        assert dispatcher.get_listeners(FormEvents.SUBMIT) == []
