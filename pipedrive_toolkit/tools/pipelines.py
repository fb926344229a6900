"""Pipeline and stage tools (API v2, read-only)."""

from ..core.models import ToolDefinition
from .base import ToolFamily, number, string


class PipelineTools(ToolFamily):

    @property
    def name(self) -> str:
        return "pipelines"

    def build_tools(self) -> list[ToolDefinition]:
        return [
            self.list_tool(
                "pipedrive_list_pipelines",
                "List all pipelines",
                "/pipelines",
                [
                    number("limit", "Number of results"),
                    string("cursor", "Pagination cursor"),
                ],
            ),
            self.get_tool(
                "pipedrive_get_pipeline",
                "Get details of a specific pipeline by ID",
                "/pipelines/{id}",
                "Pipeline ID",
            ),
        ]


class StageTools(ToolFamily):

    @property
    def name(self) -> str:
        return "stages"

    def build_tools(self) -> list[ToolDefinition]:
        return [
            self.list_tool(
                "pipedrive_list_stages",
                "List all stages, optionally filtered by pipeline",
                "/stages",
                [
                    number("pipeline_id", "Filter by pipeline ID"),
                    number("limit", "Number of results"),
                    string("cursor", "Pagination cursor"),
                ],
            ),
            self.get_tool(
                "pipedrive_get_stage",
                "Get details of a specific stage by ID",
                "/stages/{id}",
                "Stage ID",
            ),
        ]
