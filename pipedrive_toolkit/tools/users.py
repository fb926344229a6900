"""User tools (API v1 only)."""

from ..core.models import ApiVersion, ToolDefinition
from .base import ToolFamily


class UserTools(ToolFamily):

    api_version = ApiVersion.V1

    @property
    def name(self) -> str:
        return "users"

    def build_tools(self) -> list[ToolDefinition]:
        return [
            self.list_tool(
                "pipedrive_list_users",
                "List all users in the Pipedrive account",
                "/users",
                [],
            ),
            self.list_tool(
                "pipedrive_get_current_user",
                "Get the current authenticated user's details",
                "/users/me",
                [],
            ),
            self.get_tool(
                "pipedrive_get_user",
                "Get details of a specific user by ID",
                "/users/{id}",
                "User ID",
            ),
        ]
