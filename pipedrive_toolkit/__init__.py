"""Pipedrive CRM tools for agent host runtimes."""

from .plugin import (
    PLUGIN_ID,
    PLUGIN_NAME,
    PLUGIN_DESCRIPTION,
    PLUGIN_VERSION,
    CONFIG_UI_HINTS,
    register,
)
from .client import PipedriveClient, APIError

__version__ = PLUGIN_VERSION

__all__ = [
    "PLUGIN_ID",
    "PLUGIN_NAME",
    "PLUGIN_DESCRIPTION",
    "PLUGIN_VERSION",
    "CONFIG_UI_HINTS",
    "register",
    "PipedriveClient",
    "APIError",
]
