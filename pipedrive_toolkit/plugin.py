"""
Plugin entry point

Ties together configuration, the request builder, the tool families and
the skill scaffolder for a host runtime.
"""

import logging
from collections import Counter
from pathlib import Path
from typing import Any, Protocol

import httpx

from .client import PipedriveClient
from .core import (
    ApiVersion,
    ConfigError,
    ToolDefinition,
    parse_config,
    setup_skill_template,
)
from .tools import build_all_tools

logger = logging.getLogger(__name__)

PLUGIN_ID = "pipedrive"
PLUGIN_NAME = "Pipedrive CRM"
PLUGIN_DESCRIPTION = (
    "Interact with Pipedrive deals, persons, organizations, activities, "
    "notes, users and mail (API v2 with v1 fallback)"
)
PLUGIN_VERSION = "2.1.0"

CONFIG_UI_HINTS: dict[str, dict[str, Any]] = {
    "apiKey": {
        "label": "API Key",
        "sensitive": True,
        "help": "Your Pipedrive API token (Settings > Personal preferences > API)",
    },
    "domain": {
        "label": "Company Domain",
        "placeholder": "yourcompany",
        "help": (
            "The subdomain of your Pipedrive account (e.g., 'acme' from "
            "acme.pipedrive.com). Also accepts 'siteUrl' as alias."
        ),
    },
}


class PluginApi(Protocol):
    """Surface the host runtime hands to register()."""

    plugin_config: Any

    def register_tool(self, tool: ToolDefinition) -> None:
        ...


def register(
    api: PluginApi,
    http_client: httpx.Client | None = None,
    skill_dir: Path | None = None,
) -> list[ToolDefinition]:
    """
    Register all Pipedrive tools with the host.

    Steps:
    1. Scaffold the skill file (best effort)
    2. Parse apiKey and domain/siteUrl from the plugin config
    3. Build one client bound to that config
    4. Register every tool

    A missing API key or domain is logged and no tools are registered.

    Args:
        api: Host runtime API
        http_client: Optional httpx client shared by all tools
        skill_dir: Override for the skill file directory

    Returns:
        The registered tools (empty when unconfigured)
    """
    setup_skill_template(skill_dir)

    try:
        config = parse_config(api.plugin_config)
    except ConfigError as e:
        logger.warning(f"Plugin not configured: {e}")
        return []

    client = PipedriveClient(config, http_client=http_client)
    tools = build_all_tools(client)

    for tool in tools:
        api.register_tool(tool)

    counts = Counter(tool.api_version for tool in tools)
    logger.info(
        f"Registered {len(tools)} tools "
        f"({counts[ApiVersion.V2]} v2, {counts[ApiVersion.V1]} v1) for {config.host}"
    )
    return tools
