"""Mini README: Interactive interfaces for Transaction Insights.

Exports the FastAPI application factory behind the JSON API. The command line
entry point lives in ``transaction_insights_cli`` at the repository root.
"""

from .web_app import create_application

__all__ = ["create_application"]
