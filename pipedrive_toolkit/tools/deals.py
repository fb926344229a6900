"""Deal tools (API v2, deal mail messages on v1)."""

from ..core.models import ApiVersion, ToolDefinition
from .base import ToolFamily, number, string

STATUS_HELP = "Filter by status: open, won, lost, deleted"


class DealTools(ToolFamily):
    """Search, read, create, update and delete deals."""

    @property
    def name(self) -> str:
        return "deals"

    def build_tools(self) -> list[ToolDefinition]:
        return [
            self.search_tool(
                "pipedrive_search_deals",
                "Search Pipedrive deals by term",
                "/deals/search",
                [
                    string("term", "Search term", required=True),
                    string("status", STATUS_HELP),
                    number("limit", "Number of results (default 100)"),
                ],
            ),
            self.get_tool(
                "pipedrive_get_deal",
                "Get details of a specific deal by ID",
                "/deals/{id}",
                "Deal ID",
            ),
            self.list_tool(
                "pipedrive_list_deals",
                "List deals with optional filters",
                "/deals",
                [
                    string("status", STATUS_HELP),
                    number("stage_id", "Filter by pipeline stage ID"),
                    number("owner_id", "Filter by owner user ID"),
                    number("person_id", "Filter by person ID"),
                    number("org_id", "Filter by organization ID"),
                    number("pipeline_id", "Filter by pipeline ID"),
                    number("limit", "Number of results (default 100, max 500)"),
                    string("cursor", "Pagination cursor from previous response"),
                    string("sort_by", "Sort by: id, add_time, update_time"),
                    string("sort_direction", "Sort direction: asc, desc"),
                ],
            ),
            self.create_tool(
                "pipedrive_create_deal",
                "Create a new deal in Pipedrive",
                "/deals",
                [
                    string("title", "Deal title (required)", required=True),
                    number("value", "Deal value"),
                    string("currency", "Currency code (e.g., USD, EUR)"),
                    number("person_id", "Associated person/contact ID"),
                    number("org_id", "Associated organization ID"),
                    number("stage_id", "Pipeline stage ID"),
                    number("owner_id", "Owner user ID"),
                    number("pipeline_id", "Pipeline ID"),
                    string("expected_close_date", "Expected close date (YYYY-MM-DD)"),
                ],
            ),
            self.update_tool(
                "pipedrive_update_deal",
                "Update an existing deal",
                "/deals/{id}",
                [
                    number("id", "Deal ID to update (required)", required=True),
                    string("title", "New title"),
                    number("value", "New value"),
                    string("currency", "Currency code"),
                    string("status", "Status: open, won, lost, deleted"),
                    number("stage_id", "Move to stage ID"),
                    number("owner_id", "New owner user ID"),
                    number("pipeline_id", "Move to pipeline ID"),
                    string("expected_close_date", "Expected close date (YYYY-MM-DD)"),
                    string("lost_reason", "Reason for losing (when status=lost)"),
                ],
                http_method="PATCH",
            ),
            self.delete_tool(
                "pipedrive_delete_deal",
                "Delete a deal (marks as deleted, 30-day retention)",
                "/deals/{id}",
                "Deal ID to delete",
            ),
            self.list_tool(
                "pipedrive_list_deal_mail_messages",
                "List email messages linked to a deal",
                "/deals/{id}/mailMessages",
                [
                    number("id", "Deal ID", required=True),
                    number("start", "Pagination offset"),
                    number("limit", "Number of results"),
                ],
                version=ApiVersion.V1,
            ),
        ]
