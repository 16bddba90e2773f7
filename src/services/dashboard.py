"""Summary statistics for the dashboard."""

from typing import Iterable

from src.models.account import Account
from src.models.summary import DashboardSummary
from src.repositories.account_store import AccountStore


def summarize(accounts: Iterable[Account]) -> DashboardSummary:
    """Count the accounts and add up their balances."""
    accounts = list(accounts)
    return DashboardSummary(
        count=len(accounts),
        total_balance=sum(account.balance for account in accounts),
    )


class Dashboard:
    """Keeps the latest summary, recomputed whenever the store saves."""

    def __init__(self, store: AccountStore):
        self._store = store
        self._summary = summarize(store.load())
        store.subscribe(self._on_change)

    @property
    def summary(self) -> DashboardSummary:
        return self._summary

    def refresh(self) -> DashboardSummary:
        """Recompute from the stored collection, e.g. when the dashboard is shown."""
        self._summary = summarize(self._store.load())
        return self._summary

    def _on_change(self, accounts: list[Account]) -> None:
        self._summary = summarize(accounts)
