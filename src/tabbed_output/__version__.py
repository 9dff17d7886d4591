"""Version information for tabbed_output."""

__version__ = "0.1.0"
