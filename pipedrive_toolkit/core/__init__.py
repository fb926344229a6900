"""Core components for the Pipedrive toolkit."""

from .models import (
    ApiVersion,
    PipedriveConfig,
    ToolParameter,
    ToolDefinition,
    text_envelope,
    ConfigError,
    ToolParameterError,
    ToolNotFoundError,
)
from .registry import ToolRegistry
from .config_store import (
    get_base_dir,
    normalize_domain,
    parse_config,
    load_plugin_config,
)
from .skill import (
    SKILL_TEMPLATE,
    ScaffoldResult,
    default_skill_dir,
    setup_skill_template,
)

__all__ = [
    "ApiVersion",
    "PipedriveConfig",
    "ToolParameter",
    "ToolDefinition",
    "text_envelope",
    "ConfigError",
    "ToolParameterError",
    "ToolNotFoundError",
    "ToolRegistry",
    "get_base_dir",
    "normalize_domain",
    "parse_config",
    "load_plugin_config",
    "SKILL_TEMPLATE",
    "ScaffoldResult",
    "default_skill_dir",
    "setup_skill_template",
]
