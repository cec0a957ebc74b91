"""Tests for ArrayToModelTransformer."""
import pytest
from unittest.mock import MagicMock

from forms.transformers import ArrayToModelTransformer


class Article:
    def __init__(self):
        self.id = None
        self.title = ''


class TestTransform:
    def test_returns_value_unchanged(self):
        transformer = ArrayToModelTransformer(MagicMock(), Article)
        value = Article()
        assert transformer.transform(value) is value

    def test_none_passes_through(self):
        assert ArrayToModelTransformer(MagicMock(), Article).transform(None) is None


class TestReverseTransform:
    def test_instance_returned_as_is(self):
        """An already-persisted instance is not rebuilt."""
        manager = MagicMock()
        article = Article()

        result = ArrayToModelTransformer(manager, Article).reverse_transform(article)

        assert result is article
        manager.model_reverse_transform.assert_not_called()

    @pytest.mark.parametrize("value", [None, '', 'text', 42, ['list']])
    def test_non_dict_returns_new_instance(self, value):
        manager = MagicMock()

        result = ArrayToModelTransformer(manager, Article).reverse_transform(value)

        assert isinstance(result, Article)
        manager.model_reverse_transform.assert_not_called()

    def test_dict_delegates_to_model_manager(self):
        manager = MagicMock()
        data = {'title': 'Hello'}

        result = ArrayToModelTransformer(manager, Article).reverse_transform(data)

        manager.model_reverse_transform.assert_called_once_with(Article, data)
        assert result is manager.model_reverse_transform.return_value

    def test_dict_with_in_memory_manager(self, model_manager):
        result = ArrayToModelTransformer(model_manager, Article).reverse_transform(
            {'id': 7, 'title': 'Hello'}
        )

        assert isinstance(result, Article)
        assert result.id == 7
        assert result.title == 'Hello'
