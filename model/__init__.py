"""Model manager package: entity identity and collection mutation."""
from model.manager import InMemoryModelManager, ModelManager

__all__ = [
    'InMemoryModelManager',
    'ModelManager',
]
