"""Form adapters: submit events, collection merging, and data transformers."""
from forms.events import FormEvent, FormEventDispatcher, FormEvents
from forms.merge import CollectionReconciler, MergeCollectionListener
from forms.transformers import ArrayToModelTransformer

__all__ = [
    'FormEvent',
    'FormEventDispatcher',
    'FormEvents',
    'CollectionReconciler',
    'MergeCollectionListener',
    'ArrayToModelTransformer',
]
