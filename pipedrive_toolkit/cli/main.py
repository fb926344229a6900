"""Command-line entry point for the Pipedrive toolkit."""

import argparse
import json
import logging
import sys

import httpx

from pipedrive_toolkit.client import APIError
from pipedrive_toolkit.core import (
    ConfigError,
    ScaffoldResult,
    ToolNotFoundError,
    ToolParameterError,
    ToolRegistry,
    default_skill_dir,
    load_plugin_config,
    parse_config,
    setup_skill_template,
)
from pipedrive_toolkit.plugin import register

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 30.0


def setup_logging(verbose: bool = False):
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )
    # httpx INFO request logs include the api_token query parameter
    logging.getLogger("httpx").setLevel(logging.WARNING)


def build_registry(http_client: httpx.Client) -> ToolRegistry:
    """Load config, register the plugin and return the populated registry."""
    raw_config = load_plugin_config()
    # register() only warns on missing config
    parse_config(raw_config)

    registry = ToolRegistry(raw_config)
    register(registry, http_client=http_client)
    return registry


def cmd_tools(args):
    """Handle the tools command."""
    with httpx.Client(timeout=REQUEST_TIMEOUT) as http_client:
        try:
            registry = build_registry(http_client)
        except ConfigError as e:
            print(f"Configuration error: {e}", file=sys.stderr)
            sys.exit(1)

    tools = registry.list_tools()
    print(f"Registered tools ({len(tools)}):")
    print()
    for tool in tools:
        print(f"  {tool.name:40s} {tool.api_version.value}  {tool.description}")


def cmd_schema(args):
    """Handle the schema command."""
    with httpx.Client(timeout=REQUEST_TIMEOUT) as http_client:
        try:
            tool = build_registry(http_client).get_tool(args.tool)
        except ConfigError as e:
            print(f"Configuration error: {e}", file=sys.stderr)
            sys.exit(1)
        except ToolNotFoundError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

    print(json.dumps(tool.parameters_schema(), indent=2))


def cmd_call(args):
    """Handle the call command - run a single tool."""
    try:
        params = json.loads(args.params) if args.params else {}
    except json.JSONDecodeError as e:
        print(f"Error: --params is not valid JSON: {e}", file=sys.stderr)
        sys.exit(1)

    if not isinstance(params, dict):
        print("Error: --params must be a JSON object", file=sys.stderr)
        sys.exit(1)

    with httpx.Client(timeout=REQUEST_TIMEOUT) as http_client:
        try:
            registry = build_registry(http_client)
            envelope = registry.execute(args.tool, params)
        except ConfigError as e:
            print(f"Configuration error: {e}", file=sys.stderr)
            sys.exit(1)
        except (ToolNotFoundError, ToolParameterError) as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        except APIError as e:
            print(f"API error: {e}", file=sys.stderr)
            sys.exit(1)

    for item in envelope["content"]:
        print(item["text"])


def cmd_init_skill(args):
    """Handle the init-skill command."""
    skill_dir = default_skill_dir()
    result = setup_skill_template(skill_dir)

    if result == ScaffoldResult.CREATED:
        print(f"✓ Created {skill_dir / 'SKILL.md'}")
    elif result == ScaffoldResult.LATEST_WRITTEN:
        print(f"Existing skill file kept. Latest template: {skill_dir / 'SKILL.md.latest'}")
    elif result == ScaffoldResult.UNCHANGED:
        print("Skill file is up to date.")
    else:
        print("Could not set up skill template (see warnings above).", file=sys.stderr)
        sys.exit(1)


def main(argv: list[str] | None = None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="pipedrive-toolkit",
        description="Pipedrive CRM tools",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    tools_parser = subparsers.add_parser("tools", help="List available tools")
    tools_parser.set_defaults(func=cmd_tools)

    schema_parser = subparsers.add_parser("schema", help="Show a tool's parameter schema")
    schema_parser.add_argument("tool", help="Tool name (e.g., 'pipedrive_list_deals')")
    schema_parser.set_defaults(func=cmd_schema)

    call_parser = subparsers.add_parser("call", help="Run a single tool")
    call_parser.add_argument("tool", help="Tool name (e.g., 'pipedrive_get_deal')")
    call_parser.add_argument("--params", help="Tool parameters as a JSON object")
    call_parser.set_defaults(func=cmd_call)

    skill_parser = subparsers.add_parser("init-skill", help="Create or refresh the skill template")
    skill_parser.set_defaults(func=cmd_init_skill)

    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    args.func(args)


if __name__ == "__main__":
    main()
