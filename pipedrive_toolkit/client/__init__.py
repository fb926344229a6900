"""HTTP request layer for the Pipedrive REST API."""

from .pipedrive_client import PipedriveClient, APIError

__all__ = [
    "PipedriveClient",
    "APIError",
]
