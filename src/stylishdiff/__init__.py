"""stylishdiff — column-aligned terminal reports for lint diagnostics."""

__version__ = "0.1.0"
