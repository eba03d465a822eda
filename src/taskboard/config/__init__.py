"""Configuration module for the Taskboard application.

This module provides centralized configuration management for the entire application,
including database connections, logging setup, error handling, and application settings.

Key Components:
- settings: Application configuration loaded from environment variables and TOML files
- Database: SQLAlchemy async engine and session management
- Logging: Loguru-based logging configuration with development/production modes
- Error handling: Centralized error codes and messages
- Database seeding: Sample users and tasks for development
"""

from taskboard.config.config import settings
from taskboard.config.db import engine, get_session
from taskboard.config.errors import ErrorCode, ErrorNames
from taskboard.config.logger import config_logger
from taskboard.config.seed import seed_db

__all__ = [
    "ErrorCode",
    "ErrorNames",
    "config_logger",
    "engine",
    "get_session",
    "seed_db",
    "settings",
]
