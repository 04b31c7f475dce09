"""Configuration domain exports."""

from .loader import ConfigurationError, load_configuration
from .runtime_settings import Configuration, GitSettings, ReportSettings, SchemaSettings

__all__ = [
    "Configuration",
    "ConfigurationError",
    "GitSettings",
    "ReportSettings",
    "SchemaSettings",
    "load_configuration",
]
