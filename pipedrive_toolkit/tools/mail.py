"""Mailbox tools (API v1 only)."""

from ..core.models import ApiVersion, ToolDefinition
from .base import ToolFamily, number, string

FLAG_HELP = "1 = set, 0 = unset"


class MailTools(ToolFamily):
    """
    Mail threads and messages synced into Pipedrive.

    Thread updates use PUT, as the v1 mailbox API expects.
    """

    api_version = ApiVersion.V1

    @property
    def name(self) -> str:
        return "mail"

    def build_tools(self) -> list[ToolDefinition]:
        return [
            self.list_tool(
                "pipedrive_list_mail_threads",
                "List mail threads in a mailbox folder",
                "/mailbox/mailThreads",
                [
                    string("folder", "Folder: inbox, drafts, sent, archive (required)", required=True),
                    number("start", "Pagination offset"),
                    number("limit", "Number of results"),
                ],
            ),
            self.get_tool(
                "pipedrive_get_mail_thread",
                "Get details of a specific mail thread by ID",
                "/mailbox/mailThreads/{id}",
                "Mail thread ID",
            ),
            self.get_tool(
                "pipedrive_list_mail_thread_messages",
                "List all messages in a mail thread",
                "/mailbox/mailThreads/{id}/mailMessages",
                "Mail thread ID",
            ),
            self.get_tool(
                "pipedrive_get_mail_message",
                "Get a specific mail message by ID",
                "/mailbox/mailMessages/{id}",
                "Mail message ID",
                extra=[number("include_body", "1 = include the full message body")],
            ),
            self.update_tool(
                "pipedrive_update_mail_thread",
                "Update a mail thread (link to a deal or lead, change flags)",
                "/mailbox/mailThreads/{id}",
                [
                    number("id", "Mail thread ID to update (required)", required=True),
                    number("deal_id", "Link the thread to this deal ID"),
                    string("lead_id", "Link the thread to this lead ID (UUID)"),
                    number("shared_flag", f"Share the thread with other users: {FLAG_HELP}"),
                    number("read_flag", f"Mark the thread as read: {FLAG_HELP}"),
                    number("archived_flag", f"Archive the thread: {FLAG_HELP}"),
                ],
                http_method="PUT",
            ),
            self.delete_tool(
                "pipedrive_delete_mail_thread",
                "Delete a mail thread",
                "/mailbox/mailThreads/{id}",
                "Mail thread ID to delete",
            ),
        ]
