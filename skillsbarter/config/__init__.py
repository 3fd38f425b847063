"""Configuration module for database and logging settings."""

from skillsbarter.config.database import get_db, DatabaseConfig, ConfigurationError
from skillsbarter.config.logging import configure_logging

__all__ = ["get_db", "DatabaseConfig", "ConfigurationError", "configure_logging"]
