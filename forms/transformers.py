"""Data transformer turning submitted arrays into model instances."""

import logging
from typing import Any, TYPE_CHECKING

if TYPE_CHECKING:
    from model.manager import ModelManager

logger = logging.getLogger('AdminAdapters.forms.transformers')


class ArrayToModelTransformer:
    """
    Converts between a model instance and its submitted array form.

    Args:
        model_manager: Used to build instances from array data
        class_name: Model class produced by reverse_transform
    """

    def __init__(self, model_manager: "ModelManager", class_name: type):
        self.model_manager = model_manager
        self.class_name = class_name

    def transform(self, value: Any) -> Any:
        return value

    def reverse_transform(self, value: Any) -> Any:
        # A new object is submitted as a dict; once persisted, the edit
        # form hands back the instance itself
        if isinstance(value, self.class_name):
            return value

        if not isinstance(value, dict):
            logger.debug(
                f"No array data for {self.class_name.__name__} "
                f"(got {type(value).__name__}), returning empty instance"
            )
            return self.class_name()

        return self.model_manager.model_reverse_transform(self.class_name, value)
