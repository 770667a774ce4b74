"""Configuration package for auth-dashboard."""

from .constants import (
    PermissionLevel,
    NodeKind,
    GlobalRole,
    LoginStatus,
    DashboardTab,
    NodePlaceholders,
    SyncDefaults,
    ROLE_INFO,
)
from .settings import DashboardSettings, get_settings
from .logging_config import LoggingConfig, setup_logging, get_logger

__all__ = [
    # Enums
    "PermissionLevel",
    "NodeKind",
    "GlobalRole",
    "LoginStatus",
    "DashboardTab",

    # Constants
    "NodePlaceholders",
    "SyncDefaults",
    "ROLE_INFO",

    # Settings
    "DashboardSettings",
    "get_settings",

    # Logging
    "LoggingConfig",
    "setup_logging",
    "get_logger",
]
