"""twinpane - a dual-pane terminal file browser."""

__version__ = "0.3.0"
