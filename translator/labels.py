"""
Label translation strategies.

Turns field paths and property names into human-readable labels for
admin forms and list columns.
"""

import re
import string
from typing import Protocol

# Separators replaced by a space before splitting camelCase
SEPARATOR_MAP = str.maketrans({
    '_': ' ',
    '.': ' ',
})

# Lowercasing touches ASCII letters only; other capitals are kept
ASCII_LOWER_MAP = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

# Uppercase ASCII letter directly after a word character (camelCase hump)
CAMEL_HUMP = re.compile(r'(?<=\w)([A-Z])', re.ASCII)

# First letter of each word, where words are split on ASCII whitespace
WORD_START = re.compile(r'(^|[ \t\r\n\f\v])([a-z])')


class LabelTranslatorStrategy(Protocol):
    def get_label(self, label: str, context: str = '', type: str = '') -> str: ...


class NativeLabelTranslatorStrategy:
    """
    Builds labels straight from the property name, without a catalogue.

    Examples:
        >>> strategy = NativeLabelTranslatorStrategy()
        >>> strategy.get_label('firstName')
        'First Name'
        >>> strategy.get_label('author.created_at')
        'Author Created At'
    """

    def get_label(self, label: str, context: str = '', type: str = '') -> str:
        label = label.translate(SEPARATOR_MAP)
        label = CAMEL_HUMP.sub(r'_\1', label).translate(ASCII_LOWER_MAP)
        label = label.replace('_', ' ')

        return WORD_START.sub(lambda m: m.group(1) + m.group(2).upper(), label).strip()
