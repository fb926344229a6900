"""Tests for configuration parsing and loading."""

import json
import pytest

from pipedrive_toolkit.core.models import ConfigError
from pipedrive_toolkit.core.config_store import (
    get_base_dir,
    normalize_domain,
    parse_config,
    load_plugin_config,
)


def write_host_config(path, entry_key="pipedrive", config=None):
    data = {"plugins": {"entries": {entry_key: {"enabled": True, "config": config or {}}}}}
    path.write_text(json.dumps(data))


# ===== Base directory =====

def test_get_base_dir_with_env_var(isolated_home):
    """Test get_base_dir uses the CLAWDBOT_HOME environment variable."""
    base_dir = get_base_dir()
    assert base_dir == isolated_home
    assert base_dir.is_dir()


def test_get_base_dir_defaults_to_home(tmp_path, monkeypatch):
    """Test get_base_dir falls back to ~/.clawdbot."""
    monkeypatch.delenv("CLAWDBOT_HOME")
    monkeypatch.setenv("HOME", str(tmp_path))

    assert get_base_dir() == tmp_path / ".clawdbot"


# ===== parse_config =====

def test_parse_config_domain():
    """Test apiKey and domain are read."""
    config = parse_config({"apiKey": "tok", "domain": "acme"})
    assert config.api_key == "tok"
    assert config.domain == "acme"


def test_parse_config_site_url_alias():
    """Test siteUrl is accepted in place of domain."""
    config = parse_config({"apiKey": "tok", "siteUrl": "acme"})
    assert config.domain == "acme"


def test_parse_config_domain_wins_over_alias():
    """Test domain takes precedence when both are given."""
    config = parse_config({"apiKey": "tok", "domain": "primary", "siteUrl": "alias"})
    assert config.domain == "primary"


@pytest.mark.parametrize("raw", [
    None,
    {},
    {"apiKey": "tok"},
    {"domain": "acme"},
    {"apiKey": "", "domain": "acme"},
])
def test_parse_config_missing_values(raw):
    """Test missing key or domain raises ConfigError."""
    with pytest.raises(ConfigError):
        parse_config(raw)


def test_parse_config_rejects_non_mapping():
    """Test a non-dict config is refused."""
    with pytest.raises(ConfigError):
        parse_config(["apiKey", "domain"])


@pytest.mark.parametrize("value", [
    "acme",
    "acme.pipedrive.com",
    "https://acme.pipedrive.com",
    "https://acme.pipedrive.com/",
    " acme ",
])
def test_normalize_domain(value):
    """Test URL-shaped domains are reduced to the subdomain."""
    assert normalize_domain(value) == "acme"


# ===== load_plugin_config =====

def test_load_plugin_config_missing_file(isolated_home):
    """Test a missing host config file yields an empty mapping."""
    assert load_plugin_config() == {}


def test_load_plugin_config_from_file(isolated_home):
    """Test the plugin entry is read from the host config."""
    isolated_home.mkdir(parents=True, exist_ok=True)
    write_host_config(isolated_home / "config.json", config={"apiKey": "tok", "domain": "acme"})

    assert load_plugin_config() == {"apiKey": "tok", "domain": "acme"}


def test_load_plugin_config_legacy_entry_key(tmp_path):
    """Test the installer's entry key is also recognised."""
    path = tmp_path / "config.json"
    write_host_config(path, entry_key="clawdbot-pipedrive", config={"apiKey": "tok", "siteUrl": "acme"})

    assert load_plugin_config(path) == {"apiKey": "tok", "siteUrl": "acme"}


def test_load_plugin_config_env_overrides(tmp_path, monkeypatch):
    """Test environment variables override file values."""
    path = tmp_path / "config.json"
    write_host_config(path, config={"apiKey": "file-tok", "domain": "file"})
    monkeypatch.setenv("PIPEDRIVE_API_KEY", "env-tok")
    monkeypatch.setenv("PIPEDRIVE_DOMAIN", "env")

    config = load_plugin_config(path)
    assert config["apiKey"] == "env-tok"
    assert config["domain"] == "env"


def test_load_plugin_config_invalid_json(tmp_path):
    """Test invalid JSON raises ConfigError."""
    path = tmp_path / "config.json"
    path.write_text("{ not json")

    with pytest.raises(ConfigError) as exc_info:
        load_plugin_config(path)

    assert "Invalid JSON" in str(exc_info.value)
