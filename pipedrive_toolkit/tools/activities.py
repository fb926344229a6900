"""Activity tools (API v2)."""

from ..core.models import ToolDefinition
from .base import ToolFamily, boolean, number, string

TYPE_HELP = "call, meeting, task, deadline, email, lunch"
DONE_HELP = "true = done, false = not done"


class ActivityTools(ToolFamily):
    """Tasks, calls, meetings and other scheduled activities."""

    @property
    def name(self) -> str:
        return "activities"

    def build_tools(self) -> list[ToolDefinition]:
        return [
            self.list_tool(
                "pipedrive_list_activities",
                "List activities (tasks, calls, meetings) with optional filters",
                "/activities",
                [
                    number("deal_id", "Filter by deal ID"),
                    number("person_id", "Filter by person ID"),
                    number("org_id", "Filter by organization ID"),
                    number("owner_id", "Filter by owner user ID"),
                    boolean("done", f"Filter by completion: {DONE_HELP}"),
                    string("type", f"Filter by type: {TYPE_HELP}"),
                    number("limit", "Number of results (default 100)"),
                    string("cursor", "Pagination cursor"),
                    string("sort_by", "Sort by: id, add_time, update_time, due_date"),
                    string("sort_direction", "Sort direction: asc, desc"),
                ],
            ),
            self.get_tool(
                "pipedrive_get_activity",
                "Get details of a specific activity by ID",
                "/activities/{id}",
                "Activity ID",
            ),
            self.create_tool(
                "pipedrive_create_activity",
                "Create a new activity (task, call, meeting, etc.)",
                "/activities",
                [
                    string("subject", "Activity subject/title (required)", required=True),
                    string("type", f"Activity type: {TYPE_HELP} (required)", required=True),
                    string("due_date", "Due date in YYYY-MM-DD format"),
                    string("due_time", "Due time in HH:MM format"),
                    string("duration", "Duration in HH:MM format"),
                    number("deal_id", "Associated deal ID"),
                    number("person_id", "Associated person ID"),
                    number("org_id", "Associated organization ID"),
                    string("note", "Activity notes/description"),
                    boolean("done", f"Mark as done: {DONE_HELP}"),
                    number("owner_id", "Owner user ID"),
                ],
            ),
            self.update_tool(
                "pipedrive_update_activity",
                "Update an existing activity",
                "/activities/{id}",
                [
                    number("id", "Activity ID to update (required)", required=True),
                    string("subject", "New subject"),
                    string("type", "New type"),
                    string("due_date", "New due date (YYYY-MM-DD)"),
                    string("due_time", "New due time (HH:MM)"),
                    string("duration", "New duration (HH:MM)"),
                    boolean("done", f"Mark as done: {DONE_HELP}"),
                    string("note", "New notes"),
                    number("owner_id", "New owner user ID"),
                ],
                http_method="PATCH",
            ),
            self.delete_tool(
                "pipedrive_delete_activity",
                "Delete an activity (marks as deleted, 30-day retention)",
                "/activities/{id}",
                "Activity ID to delete",
            ),
        ]
