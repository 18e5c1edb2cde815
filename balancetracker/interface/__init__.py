"""Mini README: Interfaces (HTTP API) for the balance tracker.

Exports the FastAPI application factory. The command line entry point lives
in ``tracker_cli.py`` at the repository root.
"""

from .web_app import create_application

__all__ = ["create_application"]
