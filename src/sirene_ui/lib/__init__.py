"""
Local library modules for the Sirene UI.

Modules:
    logs: Logging utilities
    clients: Shared HTTP session factory
"""

from sirene_ui.lib import clients, logs

__all__ = ["clients", "logs"]
