"""Command-line interface for the Pipedrive toolkit."""
