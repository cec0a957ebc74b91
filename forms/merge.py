"""
Collection merge: reconcile a persisted collection with submitted data.

When a form edits a to-many relation, the form layer decodes the submission
into a fresh collection. Replacing the aggregate's collection with that fresh
object would break ORM change tracking, so instead the submitted entities are
merged into the persisted collection in place:

- persisted entities missing from the submission are removed
- entities present in both are left untouched (no remove + re-add)
- submitted entities not yet persisted are added

Entity identity and all mutations go through the injected ModelManager.
"""

import logging
from typing import Any, TYPE_CHECKING

from forms.events import FormEvent, FormEvents

if TYPE_CHECKING:
    from model.manager import ModelManager

logger = logging.getLogger('AdminAdapters.forms.merge')


class CollectionReconciler:
    """
    Merges a submitted collection into a persisted collection in place.

    Errors raised by the model manager are not caught. If a mutation fails
    part way, the persisted collection is left as the failed step produced
    it and must be discarded or re-fetched by the caller.

    Args:
        model_manager: Identity and mutation capability for the collections

    Usage:
        reconciler = CollectionReconciler(InMemoryModelManager())
        tags = reconciler.reconcile(article.tags, submitted_tags)
        assert tags is article.tags
    """

    def __init__(self, model_manager: "ModelManager"):
        self.model_manager = model_manager

    def reconcile(self, persisted: Any, submitted: Any) -> Any:
        """Reconcile persisted with submitted.

        Args:
            persisted: Collection currently held by the aggregate, or None
                when there is none yet (new aggregate)
            submitted: Collection decoded from the submission; may be empty

        Returns:
            submitted when persisted is None, otherwise persisted itself
            with its contents updated to match submitted
        """
        if persisted is None:
            return submitted

        if len(submitted) == 0:
            self.model_manager.collection_clear(persisted)
            logger.debug("Submitted collection empty, cleared persisted collection")
            return persisted

        # Work on a copy so the caller's submitted collection is left intact
        remaining = list(submitted)
        removed = retained = 0

        for entity in list(persisted):
            if not self.model_manager.collection_has_element(remaining, entity):
                self.model_manager.collection_remove_element(persisted, entity)
                removed += 1
            else:
                self.model_manager.collection_remove_element(remaining, entity)
                retained += 1

        for entity in remaining:
            self.model_manager.collection_add_element(persisted, entity)

        logger.debug(
            f"Merged collection: {removed} removed, {retained} retained, "
            f"{len(remaining)} added"
        )
        return persisted


class MergeCollectionListener:
    """
    Form SUBMIT listener that merges submitted data into the bound collection.

    Registered ahead of default-priority listeners and stops propagation,
    so it is the only listener that processes the submission.
    """

    PRIORITY = 10

    def __init__(self, model_manager: "ModelManager"):
        self.model_manager = model_manager
        self.reconciler = CollectionReconciler(model_manager)

    @classmethod
    def subscribed_events(cls) -> dict[str, tuple[str, int]]:
        return {
            FormEvents.SUBMIT: ('on_submit', cls.PRIORITY),
        }

    def on_submit(self, event: FormEvent) -> None:
        collection = event.form.get_data()
        data = event.data

        event.stop_propagation()

        event.set_data(self.reconciler.reconcile(collection, data))
