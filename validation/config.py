"""
Configuration validation for the admin adapters.

Provides a pydantic v2 model for validating adapter configuration
with fail-fast behavior and sensible defaults.
"""

from functools import lru_cache
from importlib import import_module
from pydantic import BaseModel, Field, field_validator, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional
import logging

from validation.errors import ConfigurationError

log = logging.getLogger('AdminAdapters.config')


class AdminAdaptersConfig(BaseModel):
    """
    Admin adapters configuration with validation.

    All fields are optional:
        log_level: Root log level (default: "info")
        stats_block_limit: Default pager size for the stats block (default: 1000, range: 1-100000)
        stats_block_template: Template rendered by the stats block (default: block_stats.html)
        mask_builder_class: Dotted path of the ACL mask builder class
        model_identifier: Attribute used as entity identity by the in-memory model manager
        debug_logging: Verbose reconciliation logging (default: False)
    """

    log_level: str = Field(
        default="info",
        description="Root log level: debug, info, warning, error"
    )

    # Dashboard stats block defaults
    stats_block_limit: int = Field(default=1000, ge=1, le=100000)
    stats_block_template: str = Field(
        default="block_stats.html",
        description="Template name resolved by the stats block's Jinja2 environment"
    )

    # ACL
    mask_builder_class: str = Field(
        default="security.mask_builder.MaskBuilder",
        description="Dotted import path of the class exposing MASK_<PERMISSION> constants"
    )

    # Model manager
    model_identifier: str = Field(
        default="id",
        description="Entity attribute (or mapping key) compared to decide identity"
    )

    debug_logging: bool = Field(
        default=False,
        description="Lower the AdminAdapters loggers to DEBUG so every collection merge is logged"
    )

    @field_validator('log_level', mode='before')
    @classmethod
    def validate_log_level(cls, v):
        """Validate log_level is one of: debug, info, warning, error."""
        valid = ('debug', 'info', 'warning', 'error')
        if isinstance(v, str) and v.lower() in valid:
            return v.lower()
        raise ValueError(f"log_level must be one of {valid}, got: {v}")

    @field_validator('mask_builder_class', mode='after')
    @classmethod
    def validate_mask_builder_class(cls, v: str) -> str:
        """Validate mask_builder_class looks like module.ClassName."""
        if '.' not in v or v.startswith('.') or v.endswith('.'):
            raise ValueError('mask_builder_class must be a dotted path like package.module.Class')
        return v

    @field_validator('model_identifier', mode='after')
    @classmethod
    def validate_model_identifier(cls, v: str) -> str:
        """Validate model_identifier is a usable attribute name."""
        v = v.strip()
        if not v.isidentifier():
            raise ValueError(f"model_identifier must be a valid attribute name, got: {v!r}")
        return v

    @field_validator('debug_logging', mode='before')
    @classmethod
    def validate_booleans(cls, v):
        """Ensure boolean fields are actual booleans, not truthy strings."""
        if isinstance(v, bool):
            return v
        if isinstance(v, str):
            lower = v.lower()
            if lower in ('true', '1', 'yes'):
                return True
            if lower in ('false', '0', 'no'):
                return False
            raise ValueError(f"Invalid boolean value: {v}")
        raise ValueError(f"Expected boolean, got {type(v).__name__}")

    def load_mask_builder(self) -> type:
        """
        Import and return the configured mask builder class.

        Raises:
            ConfigurationError: If the module or class cannot be imported
        """
        module_path, _, class_name = self.mask_builder_class.rpartition('.')
        try:
            module = import_module(module_path)
        except ImportError as e:
            raise ConfigurationError(
                f"Cannot import mask builder module {module_path!r}: {e}"
            ) from e
        try:
            return getattr(module, class_name)
        except AttributeError as e:
            raise ConfigurationError(
                f"Module {module_path!r} has no mask builder class {class_name!r}"
            ) from e

    def log_config(self) -> None:
        """Log configuration summary."""
        log.info(
            f"Admin adapters config: log_level={self.log_level}, "
            f"stats_block_limit={self.stats_block_limit}, "
            f"stats_block_template={self.stats_block_template}, "
            f"mask_builder_class={self.mask_builder_class}, "
            f"model_identifier={self.model_identifier}"
        )
        if self.debug_logging:
            log.warning(
                "DEBUG LOGGING ENABLED: every collection merge is logged. "
                "Disable once troubleshooting is done."
            )


def validate_config(config_dict: dict) -> tuple[Optional[AdminAdaptersConfig], Optional[str]]:
    """
    Validate configuration dictionary and return AdminAdaptersConfig or error message.

    Args:
        config_dict: Dictionary containing configuration values

    Returns:
        Tuple of (AdminAdaptersConfig, None) on success,
        or (None, error_message) on validation failure
    """
    try:
        config = AdminAdaptersConfig(**config_dict)
        return (config, None)
    except ValidationError as e:
        # Extract user-friendly error messages
        errors = []
        for error in e.errors():
            field = '.'.join(str(loc) for loc in error['loc'])
            msg = error['msg']
            errors.append(f"{field}: {msg}")
        error_message = '; '.join(errors)
        return (None, error_message)


class AdminAdaptersSettings(BaseSettings):
    """Environment overrides for AdminAdaptersConfig.

    Every field maps to an ADMIN_ADAPTERS_-prefixed environment variable
    (e.g. ADMIN_ADAPTERS_STATS_BLOCK_LIMIT). Values are passed through
    AdminAdaptersConfig for validation, so only raw types are declared here.
    """

    model_config = SettingsConfigDict(env_prefix="ADMIN_ADAPTERS_")

    log_level: str = "info"
    stats_block_limit: str = "1000"
    stats_block_template: str = "block_stats.html"
    mask_builder_class: str = "security.mask_builder.MaskBuilder"
    model_identifier: str = "id"
    debug_logging: str = "false"


@lru_cache(maxsize=1)
def get_config() -> AdminAdaptersConfig:
    """Return the cached AdminAdaptersConfig built from the environment.

    Raises:
        ConfigurationError: If any environment value fails validation
    """
    settings = AdminAdaptersSettings()
    config, error = validate_config(settings.model_dump())
    if config is None:
        raise ConfigurationError(f"Invalid ADMIN_ADAPTERS_ environment configuration: {error}")
    return config


# Re-export ValidationError for external use
__all__ = ['AdminAdaptersConfig', 'AdminAdaptersSettings', 'get_config', 'validate_config', 'ValidationError']
