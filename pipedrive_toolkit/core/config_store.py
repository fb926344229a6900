"""Configuration parsing and host config file loading."""

import json
import logging
import os
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

from .models import PipedriveConfig, ConfigError

logger = logging.getLogger(__name__)

# Keys the plugin entry may be stored under in the host config file
PLUGIN_ENTRY_KEYS = ("pipedrive", "clawdbot-pipedrive")

PIPEDRIVE_HOST_SUFFIX = ".pipedrive.com"


def get_base_dir() -> Path:
    """
    Get the host runtime's configuration directory.

    The directory is determined by:
    1. Environment variable CLAWDBOT_HOME if set
    2. Otherwise, ~/.clawdbot

    The directory is created if it does not exist.

    Returns:
        Path to the base directory
    """
    env_home = os.environ.get("CLAWDBOT_HOME")
    if env_home:
        base_dir = Path(env_home)
    else:
        base_dir = Path.home() / ".clawdbot"

    base_dir.mkdir(parents=True, exist_ok=True)
    return base_dir


def normalize_domain(value: str) -> str:
    """
    Reduce a domain setting to the bare tenant subdomain.

    Accepts 'acme', 'acme.pipedrive.com' or 'https://acme.pipedrive.com/'.
    """
    value = value.strip()
    if "://" in value:
        value = urlparse(value).netloc or value
    value = value.strip("/")
    if value.endswith(PIPEDRIVE_HOST_SUFFIX):
        value = value[: -len(PIPEDRIVE_HOST_SUFFIX)]
    return value


def _first(raw: dict[str, Any], *keys: str) -> str | None:
    for key in keys:
        value = raw.get(key)
        if value:
            return str(value)
    return None


def parse_config(raw: dict[str, Any] | None) -> PipedriveConfig:
    """
    Build a PipedriveConfig from the host-supplied plugin config.

    Args:
        raw: Plugin config mapping ('apiKey' and 'domain', with 'siteUrl'
             accepted as an alias for 'domain')

    Returns:
        Immutable PipedriveConfig

    Raises:
        ConfigError: If the API key or domain is missing
    """
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Plugin config must be a mapping, got {type(raw).__name__}")

    api_key = _first(raw, "apiKey", "api_key")
    domain = _first(raw, "domain", "siteUrl", "site_url")
    if domain:
        domain = normalize_domain(domain)

    if not api_key or not domain:
        raise ConfigError("missing apiKey or domain/siteUrl")

    return PipedriveConfig(api_key=api_key, domain=domain)


def load_plugin_config(path: Path | None = None) -> dict[str, Any]:
    """
    Load the Pipedrive plugin config from the host config file.

    Environment variables PIPEDRIVE_API_KEY and PIPEDRIVE_DOMAIN override
    values from the file. A missing file yields an empty mapping.

    Args:
        path: Config file path (default: <base_dir>/config.json)

    Returns:
        Raw plugin config mapping, suitable for parse_config()

    Raises:
        ConfigError: If the file exists but is not valid JSON
    """
    if path is None:
        path = get_base_dir() / "config.json"

    config: dict[str, Any] = {}
    if path.exists():
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {path}: {e}")
        logger.debug(f"Loaded host config from {path}")

        entries = data.get("plugins", {}).get("entries", {}) if isinstance(data, dict) else {}
        for key in PLUGIN_ENTRY_KEYS:
            entry = entries.get(key)
            if isinstance(entry, dict):
                config = dict(entry.get("config") or {})
                break

    if os.environ.get("PIPEDRIVE_API_KEY"):
        config["apiKey"] = os.environ["PIPEDRIVE_API_KEY"]
    if os.environ.get("PIPEDRIVE_DOMAIN"):
        config["domain"] = os.environ["PIPEDRIVE_DOMAIN"]

    return config
