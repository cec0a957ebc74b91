"""
Validation module for the admin adapters.

Provides configuration validation and the adapter error taxonomy.
"""

from validation.errors import (
    AdminAdaptersError,
    AdminNotFoundError,
    ConfigurationError,
    ModelTransformError,
    describe_error,
)
from validation.config import AdminAdaptersConfig, AdminAdaptersSettings, get_config, validate_config

__all__ = [
    'AdminAdaptersError',
    'AdminNotFoundError',
    'ConfigurationError',
    'ModelTransformError',
    'describe_error',
    'AdminAdaptersConfig',
    'AdminAdaptersSettings',
    'get_config',
    'validate_config',
]
