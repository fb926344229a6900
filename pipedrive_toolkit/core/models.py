"""Core data models for the Pipedrive toolkit."""

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable


class ApiVersion(Enum):
    """Pipedrive REST surface a tool is routed to."""
    V2 = "v2"
    V1 = "v1"

    @property
    def base_path(self) -> str:
        return f"/api/{self.value}"


@dataclass(frozen=True)
class PipedriveConfig:
    """Credentials and tenant captured once at registration."""
    api_key: str = field(repr=False)
    domain: str

    @property
    def host(self) -> str:
        return f"{self.domain}.pipedrive.com"

    def base_url(self, version: ApiVersion = ApiVersion.V2) -> str:
        """Return the API base URL for the given version."""
        return f"https://{self.host}{version.base_path}"


PARAMETER_TYPES = {"string", "number", "boolean"}


@dataclass(frozen=True)
class ToolParameter:
    """A single declared tool parameter."""
    name: str
    type: str
    description: str
    required: bool = False

    def __post_init__(self):
        if self.type not in PARAMETER_TYPES:
            raise ValueError(
                f"Unsupported parameter type '{self.type}' for '{self.name}'"
            )

    def json_schema(self) -> dict[str, Any]:
        """Render the JSON-Schema fragment for this parameter."""
        return {"type": self.type, "description": self.description}

    def accepts(self, value: Any) -> bool:
        """Check a value against the declared type."""
        if self.type == "boolean":
            return isinstance(value, bool)
        if self.type == "number":
            return isinstance(value, (int, float)) and not isinstance(value, bool)
        return isinstance(value, str)


@dataclass(frozen=True)
class ToolDefinition:
    """
    A named operation exposed to the host runtime.

    The handler receives the validated parameter dict and returns the
    JSON data from Pipedrive, which is wrapped in a text content envelope.
    """
    name: str
    description: str
    parameters: tuple[ToolParameter, ...]
    api_version: ApiVersion
    handler: Callable[[dict[str, Any]], Any] = field(repr=False, compare=False)

    def parameters_schema(self) -> dict[str, Any]:
        """Render the JSON-Schema object describing the tool's parameters."""
        return {
            "type": "object",
            "properties": {p.name: p.json_schema() for p in self.parameters},
            "required": [p.name for p in self.parameters if p.required],
        }

    def validate(self, params: dict[str, Any] | None) -> dict[str, Any]:
        """
        Type-check parameters against the declared schema.

        Undeclared keys and None values are dropped.

        Raises:
            ToolParameterError: If a required parameter is missing or a
                value has the wrong type
        """
        params = params or {}
        cleaned: dict[str, Any] = {}

        for param in self.parameters:
            value = params.get(param.name)
            if value is None:
                if param.required:
                    raise ToolParameterError(
                        f"{self.name}: missing required parameter '{param.name}'"
                    )
                continue
            if not param.accepts(value):
                raise ToolParameterError(
                    f"{self.name}: parameter '{param.name}' must be a {param.type}, "
                    f"got {type(value).__name__}"
                )
            cleaned[param.name] = value

        return cleaned

    def execute(self, call_id: str, params: dict[str, Any] | None) -> dict[str, Any]:
        """Run the tool and return the host content envelope."""
        data = self.handler(self.validate(params))
        return text_envelope(data)


def text_envelope(data: Any) -> dict[str, Any]:
    """Wrap JSON data in the host's text content envelope."""
    return {"content": [{"type": "text", "text": json.dumps(data, indent=2)}]}


class ConfigError(Exception):
    """Raised when plugin configuration is missing or invalid."""
    pass


class ToolParameterError(ValueError):
    """Raised when tool parameters fail local type checking."""
    pass


class ToolNotFoundError(Exception):
    """Raised when a tool is not found in the registry."""
    pass
