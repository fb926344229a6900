"""Pipedrive tool families and the static version routing table."""

from ..client.pipedrive_client import PipedriveClient
from ..core.models import ToolDefinition
from .base import ToolFamily
from .deals import DealTools
from .persons import PersonTools
from .organizations import OrganizationTools
from .activities import ActivityTools
from .pipelines import PipelineTools, StageTools
from .notes import NoteTools
from .users import UserTools
from .mail import MailTools

TOOL_FAMILIES: tuple[type[ToolFamily], ...] = (
    DealTools,
    PersonTools,
    OrganizationTools,
    ActivityTools,
    PipelineTools,
    StageTools,
    NoteTools,
    UserTools,
    MailTools,
)


def build_all_tools(client: PipedriveClient) -> list[ToolDefinition]:
    """Build every tool of every family against one client."""
    tools: list[ToolDefinition] = []
    for family_cls in TOOL_FAMILIES:
        tools.extend(family_cls(client).build_tools())
    return tools


__all__ = [
    "ToolFamily",
    "DealTools",
    "PersonTools",
    "OrganizationTools",
    "ActivityTools",
    "PipelineTools",
    "StageTools",
    "NoteTools",
    "UserTools",
    "MailTools",
    "TOOL_FAMILIES",
    "build_all_tools",
]
