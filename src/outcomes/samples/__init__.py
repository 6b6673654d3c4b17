"""Sample producers built on outcomes."""

from __future__ import annotations

from .configurations import (
    Configuration,
    ConfigurationErrors,
    ConfigurationResponse,
    ConfigurationService,
    CreateConfigurationRequest,
    UpdateConfigurationRequest,
)

__all__ = [
    "Configuration",
    "ConfigurationErrors",
    "ConfigurationResponse",
    "ConfigurationService",
    "CreateConfigurationRequest",
    "UpdateConfigurationRequest",
]
