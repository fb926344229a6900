"""Base class and shared builders for Pipedrive tool families."""

from abc import ABC, abstractmethod
from typing import Any, Callable

from ..client.pipedrive_client import PipedriveClient
from ..core.models import ApiVersion, ToolDefinition, ToolParameter


def string(name: str, description: str, required: bool = False) -> ToolParameter:
    return ToolParameter(name, "string", description, required)


def number(name: str, description: str, required: bool = False) -> ToolParameter:
    return ToolParameter(name, "number", description, required)


def boolean(name: str, description: str, required: bool = False) -> ToolParameter:
    return ToolParameter(name, "boolean", description, required)


def query_value(value: Any) -> str:
    """String-coerce a parameter value for a query string."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_query(params: dict[str, Any]) -> dict[str, str]:
    """Build query parameters from every provided value, skipping None."""
    return {key: query_value(value) for key, value in params.items() if value is not None}


def contact_entries(value: str) -> list[dict[str, Any]]:
    """Shape a flat email/phone string as a v2 multi-value contact field."""
    return [{"value": value, "primary": True, "label": "work"}]


def apply_contact_fields(body: dict[str, Any]) -> dict[str, Any]:
    """
    Replace flat 'email'/'phone' with v2 'emails'/'phones' arrays.

    The flat keys never reach the request body.
    """
    body = dict(body)
    email = body.pop("email", None)
    phone = body.pop("phone", None)
    if email:
        body["emails"] = contact_entries(email)
    if phone:
        body["phones"] = contact_entries(phone)
    return body


class ToolFamily(ABC):
    """
    Abstract base class for a family of tools over one Pipedrive entity.

    Each family declares the API version its tools target by default.
    Tools whose endpoint lives on another surface pass an explicit version.
    """

    api_version: ApiVersion = ApiVersion.V2

    def __init__(self, client: PipedriveClient):
        self.client = client

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the family name (e.g., 'deals')."""
        pass

    @abstractmethod
    def build_tools(self) -> list[ToolDefinition]:
        """Return the tool definitions for this family."""
        pass

    def tool(
        self,
        name: str,
        description: str,
        parameters: list[ToolParameter],
        handler: Callable[[dict[str, Any], ApiVersion], Any],
        version: ApiVersion | None = None,
    ) -> ToolDefinition:
        """Bind a handler to the resolved API version and wrap it as a tool."""
        resolved = version or self.api_version

        def run(params: dict[str, Any]) -> Any:
            return handler(params, resolved)

        return ToolDefinition(
            name=name,
            description=description,
            parameters=tuple(parameters),
            api_version=resolved,
            handler=run,
        )

    def list_tool(
        self,
        name: str,
        description: str,
        path: str,
        parameters: list[ToolParameter],
        version: ApiVersion | None = None,
    ) -> ToolDefinition:
        """GET a collection, forwarding every provided parameter as query."""
        def handler(params: dict[str, Any], api_version: ApiVersion) -> Any:
            id_value = params.get("id")
            query = {k: v for k, v in params.items() if k != "id"}
            return self.client.request(
                "GET",
                expand_path(path, id_value),
                params=build_query(query),
                version=api_version,
            )

        return self.tool(name, description, parameters, handler, version)

    def search_tool(
        self,
        name: str,
        description: str,
        path: str,
        parameters: list[ToolParameter],
    ) -> ToolDefinition:
        """GET a search endpoint; parameters must declare a required 'term'."""
        if not any(p.name == "term" and p.required for p in parameters):
            raise ValueError(f"Search tool '{name}' must declare a required 'term'")
        return self.list_tool(name, description, path, parameters)

    def get_tool(
        self,
        name: str,
        description: str,
        path: str,
        id_description: str,
        extra: list[ToolParameter] | None = None,
        version: ApiVersion | None = None,
    ) -> ToolDefinition:
        """GET a single record by ID."""
        parameters = [number("id", id_description, required=True)] + (extra or [])
        return self.list_tool(name, description, path, parameters, version)

    def create_tool(
        self,
        name: str,
        description: str,
        path: str,
        parameters: list[ToolParameter],
        transform: Callable[[dict[str, Any]], dict[str, Any]] | None = None,
    ) -> ToolDefinition:
        """POST every provided field as the JSON body."""
        def handler(params: dict[str, Any], api_version: ApiVersion) -> Any:
            body = transform(params) if transform else dict(params)
            return self.client.request("POST", path, json_body=body, version=api_version)

        return self.tool(name, description, parameters, handler)

    def update_tool(
        self,
        name: str,
        description: str,
        path: str,
        parameters: list[ToolParameter],
        http_method: str,
        transform: Callable[[dict[str, Any]], dict[str, Any]] | None = None,
    ) -> ToolDefinition:
        """Send provided fields to the record path; 'id' stays out of the body."""
        def handler(params: dict[str, Any], api_version: ApiVersion) -> Any:
            body = dict(params)
            record_id = body.pop("id")
            if transform:
                body = transform(body)
            return self.client.request(
                http_method,
                expand_path(path, record_id),
                json_body=body,
                version=api_version,
            )

        return self.tool(name, description, parameters, handler)

    def delete_tool(self, name: str, description: str, path: str, id_description: str) -> ToolDefinition:
        """DELETE a record by ID and return Pipedrive's acknowledgement."""
        def handler(params: dict[str, Any], api_version: ApiVersion) -> Any:
            return self.client.request(
                "DELETE",
                expand_path(path, params["id"]),
                version=api_version,
            )

        return self.tool(name, description, [number("id", id_description, required=True)], handler)


def expand_path(path: str, record_id: Any = None) -> str:
    """Substitute {id} in a path template."""
    if "{id}" not in path:
        return path
    return path.replace("{id}", query_value(record_id))
