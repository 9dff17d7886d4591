"""Command line interface for tabbed-output."""
