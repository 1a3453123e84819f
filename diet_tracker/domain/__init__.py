"""Dashboard domain utilities."""

from .summary import build_dashboard_summary, latest_by_date

__all__ = ["build_dashboard_summary", "latest_by_date"]
