"""Mini README: Interfaces (web/CLI) for Spendboard.

Exports the FastAPI application factory that serves the dashboard API.
Future interface modules should live alongside this module.
"""

from .web_app import create_application

__all__ = ["create_application"]
