"""Tests for the in-process tool registry."""

import json
import pytest

from pipedrive_toolkit.core.models import (
    ApiVersion,
    ToolDefinition,
    ToolParameter,
    ToolNotFoundError,
)
from pipedrive_toolkit.core.registry import ToolRegistry


def make_tool(name, result=None):
    return ToolDefinition(
        name=name,
        description=f"{name} description",
        parameters=(ToolParameter("id", "number", "ID"),),
        api_version=ApiVersion.V1,
        handler=lambda params: result if result is not None else params,
    )


@pytest.fixture
def registry():
    return ToolRegistry({"apiKey": "tok", "domain": "acme"})


def test_registry_exposes_plugin_config(registry):
    """Test the registry carries the plugin config like a host would."""
    assert registry.plugin_config == {"apiKey": "tok", "domain": "acme"}


def test_default_plugin_config_is_empty():
    """Test a registry without config exposes an empty mapping."""
    assert ToolRegistry().plugin_config == {}


def test_register_and_get_tool(registry):
    """Test registering and retrieving a tool."""
    tool = make_tool("pipedrive_get_thing")
    registry.register_tool(tool)

    assert registry.get_tool("pipedrive_get_thing") is tool
    assert "pipedrive_get_thing" in registry
    assert len(registry) == 1


def test_register_tool_overwrite(registry, caplog):
    """Test registering the same name twice keeps the second tool."""
    registry.register_tool(make_tool("dup", result={"v": 1}))
    second = make_tool("dup", result={"v": 2})
    registry.register_tool(second)

    assert registry.get_tool("dup") is second
    assert len(registry) == 1
    assert "already registered" in caplog.text


def test_get_tool_not_found(registry):
    """Test looking up an unknown tool."""
    with pytest.raises(ToolNotFoundError) as exc_info:
        registry.get_tool("missing")

    assert "missing" in str(exc_info.value)


def test_list_tools_sorted(registry):
    """Test tools are listed by name."""
    for name in ["zeta", "alpha", "mid"]:
        registry.register_tool(make_tool(name))

    assert [t.name for t in registry.list_tools()] == ["alpha", "mid", "zeta"]


def test_execute(registry):
    """Test executing a registered tool returns its envelope."""
    registry.register_tool(make_tool("echo"))

    envelope = registry.execute("echo", {"id": 5})

    assert json.loads(envelope["content"][0]["text"]) == {"id": 5}


def test_reset(registry):
    """Test reset clears all tools."""
    registry.register_tool(make_tool("a"))
    registry.reset()

    assert registry.list_tools() == []
