"""Command-line interface for application-summary."""
