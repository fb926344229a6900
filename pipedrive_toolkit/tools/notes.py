"""Note tools (API v1 only)."""

from ..core.models import ApiVersion, ToolDefinition
from .base import ToolFamily, number, string


class NoteTools(ToolFamily):
    """Notes attached to deals, persons or organizations."""

    # v2 has no notes endpoints
    api_version = ApiVersion.V1

    @property
    def name(self) -> str:
        return "notes"

    def build_tools(self) -> list[ToolDefinition]:
        return [
            self.list_tool(
                "pipedrive_list_notes",
                "List notes for a deal, person, or organization",
                "/notes",
                [
                    number("deal_id", "Filter by deal ID"),
                    number("person_id", "Filter by person ID"),
                    number("org_id", "Filter by organization ID"),
                    number("limit", "Number of results"),
                    number("start", "Pagination offset"),
                ],
            ),
            self.get_tool(
                "pipedrive_get_note",
                "Get details of a specific note by ID",
                "/notes/{id}",
                "Note ID",
            ),
            self.create_tool(
                "pipedrive_create_note",
                "Create a note on a deal, person, or organization",
                "/notes",
                [
                    string("content", "Note content (required)", required=True),
                    number("deal_id", "Attach to deal ID"),
                    number("person_id", "Attach to person ID"),
                    number("org_id", "Attach to organization ID"),
                ],
            ),
            self.update_tool(
                "pipedrive_update_note",
                "Update an existing note",
                "/notes/{id}",
                [
                    number("id", "Note ID to update (required)", required=True),
                    string("content", "New content", required=True),
                ],
                http_method="PUT",
            ),
            self.delete_tool(
                "pipedrive_delete_note",
                "Delete a note",
                "/notes/{id}",
                "Note ID to delete",
            ),
        ]
