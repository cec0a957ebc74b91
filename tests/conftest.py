"""
Shared pytest fixtures for admin adapter tests.

Provides reusable fixtures for:
- Entities and the in-memory model manager
- Admin collaborators (pool, admin, datagrid, security handler)
- Configuration dictionaries

Collaborators are unittest.mock doubles, so no admin framework, ORM, or
security provider is needed during test execution.
"""

import pytest
from types import SimpleNamespace
from unittest.mock import Mock, MagicMock

from model.manager import InMemoryModelManager


# =============================================================================
# Entity / Model Manager Fixtures
# =============================================================================

@pytest.fixture
def make_entity():
    """
    Factory for identity-bearing entities.

    Usage:
        def test_merge(make_entity):
            a = make_entity(1, name="A")
            assert a.id == 1
    """
    def _make(entity_id, **attrs):
        return SimpleNamespace(id=entity_id, **attrs)
    return _make


@pytest.fixture
def model_manager():
    """In-memory model manager comparing entities by their 'id' attribute."""
    return InMemoryModelManager()


@pytest.fixture
def spy_model_manager(model_manager):
    """
    Model manager whose calls are recorded but still executed.

    Usage:
        def test_calls(spy_model_manager):
            ...
            spy_model_manager.collection_add_element.assert_not_called()
    """
    return Mock(wraps=model_manager)


# =============================================================================
# Admin Collaborator Fixtures
# =============================================================================

@pytest.fixture
def mock_security_handler():
    """
    Mock security handler exposing the standard object permissions.

    Provides:
        - get_object_permissions(): VIEW, EDIT, DELETE, UNDELETE, OPERATOR, MASTER, OWNER
        - build_security_information(): Empty dict by default
    """
    handler = MagicMock()
    handler.get_object_permissions.return_value = [
        'VIEW', 'EDIT', 'DELETE', 'UNDELETE', 'OPERATOR', 'MASTER', 'OWNER'
    ]
    handler.build_security_information.return_value = {}
    return handler


@pytest.fixture
def mock_admin(mock_security_handler):
    """
    Mock admin wired to mock_security_handler.

    Provides:
        - get_security_handler(): mock_security_handler
        - is_granted(): True by default (current user is an owner)
        - get_datagrid(): MagicMock datagrid
        - generate_url(): '/admin/article/list'
    """
    admin = MagicMock()
    admin.get_security_handler.return_value = mock_security_handler
    admin.is_granted.return_value = True
    admin.generate_url.return_value = '/admin/article/list'

    datagrid = MagicMock()
    datagrid.get_pager.return_value.get_nb_results.return_value = 42
    admin.get_datagrid.return_value = datagrid
    return admin


@pytest.fixture
def mock_pool(mock_admin):
    """Mock admin pool resolving every admin code to mock_admin."""
    pool = MagicMock()
    pool.get_admin_by_admin_code.return_value = mock_admin
    return pool


# =============================================================================
# Configuration Fixtures
# =============================================================================

@pytest.fixture
def valid_config_dict():
    """
    Dictionary of valid configuration values.

    Usage:
        def test_config_parsing(valid_config_dict):
            config = AdminAdaptersConfig(**valid_config_dict)
    """
    return {
        'log_level': 'info',
        'stats_block_limit': 500,
        'stats_block_template': 'block_stats.html',
        'mask_builder_class': 'security.mask_builder.MaskBuilder',
        'model_identifier': 'id',
    }
