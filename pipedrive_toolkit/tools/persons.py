"""Person tools (API v2)."""

from ..core.models import ApiVersion, ToolDefinition
from .base import ToolFamily, apply_contact_fields, number, string


class PersonTools(ToolFamily):
    """
    Tools for persons (contacts).

    Create and update take flat 'email'/'phone' strings and send them as
    the structured 'emails'/'phones' arrays v2 requires.
    """

    @property
    def name(self) -> str:
        return "persons"

    def build_tools(self) -> list[ToolDefinition]:
        return [
            self.search_tool(
                "pipedrive_search_persons",
                "Search for persons/contacts by name, email, phone, or notes",
                "/persons/search",
                [
                    string("term", "Search term (name, email, phone)", required=True),
                    number("limit", "Number of results"),
                ],
            ),
            self.get_tool(
                "pipedrive_get_person",
                "Get details of a specific person by ID",
                "/persons/{id}",
                "Person ID",
            ),
            self.list_tool(
                "pipedrive_list_persons",
                "List all persons with optional filters",
                "/persons",
                [
                    number("owner_id", "Filter by owner user ID"),
                    number("org_id", "Filter by organization ID"),
                    number("limit", "Number of results (default 100)"),
                    string("cursor", "Pagination cursor"),
                    string("sort_by", "Sort by: id, add_time, update_time, name"),
                    string("sort_direction", "Sort direction: asc, desc"),
                ],
            ),
            self.create_tool(
                "pipedrive_create_person",
                "Create a new person/contact",
                "/persons",
                [
                    string("name", "Person name (required)", required=True),
                    string("email", "Email address"),
                    string("phone", "Phone number"),
                    number("org_id", "Associated organization ID"),
                    number("owner_id", "Owner user ID"),
                ],
                transform=apply_contact_fields,
            ),
            self.update_tool(
                "pipedrive_update_person",
                "Update an existing person/contact",
                "/persons/{id}",
                [
                    number("id", "Person ID to update (required)", required=True),
                    string("name", "New name"),
                    string("email", "New email"),
                    string("phone", "New phone"),
                    number("org_id", "New organization ID"),
                    number("owner_id", "New owner user ID"),
                ],
                http_method="PATCH",
                transform=apply_contact_fields,
            ),
            self.delete_tool(
                "pipedrive_delete_person",
                "Delete a person (marks as deleted, 30-day retention)",
                "/persons/{id}",
                "Person ID to delete",
            ),
            self.list_tool(
                "pipedrive_list_person_mail_messages",
                "List email messages linked to a person",
                "/persons/{id}/mailMessages",
                [
                    number("id", "Person ID", required=True),
                    number("start", "Pagination offset"),
                    number("limit", "Number of results"),
                ],
                version=ApiVersion.V1,
            ),
        ]
