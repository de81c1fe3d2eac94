"""
Configuration module: Settings, logging, constants.
"""

from shared.config.settings import settings, get_settings
from shared.config.logging import get_logger, setup_logging
from shared.config.constants import (
    AuditActions,
    BloodTypes,
    DbProviders,
    DocumentTypes,
    Limits,
)

__all__ = [
    # settings
    "settings",
    "get_settings",
    # logging
    "get_logger",
    "setup_logging",
    # constants
    "AuditActions",
    "BloodTypes",
    "DbProviders",
    "DocumentTypes",
    "Limits",
]
