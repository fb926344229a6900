"""Organization tools (API v2)."""

from ..core.models import ToolDefinition
from .base import ToolFamily, number, string


class OrganizationTools(ToolFamily):

    @property
    def name(self) -> str:
        return "organizations"

    def build_tools(self) -> list[ToolDefinition]:
        return [
            self.search_tool(
                "pipedrive_search_organizations",
                "Search for organizations by name, address, or notes",
                "/organizations/search",
                [
                    string("term", "Search term (organization name)", required=True),
                    number("limit", "Number of results"),
                ],
            ),
            self.get_tool(
                "pipedrive_get_organization",
                "Get details of a specific organization by ID",
                "/organizations/{id}",
                "Organization ID",
            ),
            self.list_tool(
                "pipedrive_list_organizations",
                "List all organizations with optional filters",
                "/organizations",
                [
                    number("owner_id", "Filter by owner user ID"),
                    number("limit", "Number of results (default 100)"),
                    string("cursor", "Pagination cursor"),
                    string("sort_by", "Sort by: id, add_time, update_time, name"),
                    string("sort_direction", "Sort direction: asc, desc"),
                ],
            ),
            self.create_tool(
                "pipedrive_create_organization",
                "Create a new organization",
                "/organizations",
                [
                    string("name", "Organization name (required)", required=True),
                    string("address", "Address"),
                    number("owner_id", "Owner user ID"),
                ],
            ),
            self.update_tool(
                "pipedrive_update_organization",
                "Update an existing organization",
                "/organizations/{id}",
                [
                    number("id", "Organization ID to update (required)", required=True),
                    string("name", "New name"),
                    string("address", "New address"),
                    number("owner_id", "New owner user ID"),
                ],
                http_method="PATCH",
            ),
            self.delete_tool(
                "pipedrive_delete_organization",
                "Delete an organization (marks as deleted, 30-day retention)",
                "/organizations/{id}",
                "Organization ID to delete",
            ),
        ]
