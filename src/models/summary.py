"""Dashboard summary model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DashboardSummary:
    """Derived statistics over the whole account collection."""

    count: int
    total_balance: int
