from __future__ import annotations


class DashboardError(Exception):
    """Base error for the dashboard core."""


class IngestError(DashboardError):
    """The whole input is unusable (empty body, broken CSV, no date column)."""


class FetchError(IngestError):
    """Retrieving a CSV from a URL failed (network or HTTP status)."""
