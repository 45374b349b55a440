"""Configuration for the project bootstrapper."""

from project_bootstrap.config.logging import configure_logging
from project_bootstrap.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings", "configure_logging"]
