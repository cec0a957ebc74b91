"""Label translation strategies."""
from translator.labels import LabelTranslatorStrategy, NativeLabelTranslatorStrategy

__all__ = [
    'LabelTranslatorStrategy',
    'NativeLabelTranslatorStrategy',
]
