"""User-facing actions over the ledger."""

import logging

from src.models.account import Account
from src.models.exceptions import BankError
from src.models.summary import DashboardSummary
from src.services.dashboard import Dashboard
from src.services.formatting import format_money
from src.services.ledger_service import LedgerService
from src.services.notifier import Notifier
from src.services.parsing import parse_account_no, parse_account_type, parse_amount

logger = logging.getLogger(__name__)


class LedgerActions:
    """
    Entry points for the presentation layer.

    Each action takes raw field values, runs one ledger operation and
    publishes a notification for the outcome. Ledger errors stop here: they
    become error notifications and the action returns None.
    """

    def __init__(
        self,
        ledger: LedgerService,
        notifier: Notifier,
        dashboard: Dashboard,
        currency_symbol: str = "₹",
    ):
        self._ledger = ledger
        self._notifier = notifier
        self._dashboard = dashboard
        self._symbol = currency_symbol

    def _fail(self, err: BankError) -> None:
        logger.info("Action rejected: %s", err)
        self._notifier.notify(str(err), is_error=True)

    def create_account(self, account_no, holder_name, account_type, initial_deposit) -> Account | None:
        try:
            account = self._ledger.create(
                parse_account_no(account_no),
                holder_name,
                parse_account_type(account_type),
                parse_amount(initial_deposit),
            )
        except BankError as err:
            self._fail(err)
            return None
        self._notifier.notify("Account Created Successfully!")
        return account

    def deposit(self, account_no, amount) -> int | None:
        return self._transaction(self._ledger.deposit, account_no, amount)

    def withdraw(self, account_no, amount) -> int | None:
        return self._transaction(self._ledger.withdraw, account_no, amount)

    def _transaction(self, operation, account_no, amount) -> int | None:
        if not str(account_no).strip() or not str(amount).strip():
            self._notifier.notify("Please fill in all fields.", is_error=True)
            return None
        try:
            balance = operation(parse_account_no(account_no), parse_amount(amount))
        except BankError as err:
            self._fail(err)
            return None
        self._notifier.notify(
            f"Transaction successful! New Balance: {format_money(balance, self._symbol)}"
        )
        return balance

    def enquire(self, account_no) -> Account | None:
        """Look up an account; only a failed lookup produces a notification."""
        try:
            return self._ledger.enquire(parse_account_no(account_no))
        except BankError as err:
            self._fail(err)
            return None

    def list_all(self) -> list[Account]:
        return self._ledger.list_all()

    def modify_account(
        self, account_no, holder_name, account_type, balance, admin_override: bool = True
    ) -> Account | None:
        try:
            account = self._ledger.modify(
                parse_account_no(account_no),
                holder_name,
                parse_account_type(account_type),
                parse_amount(balance),
                admin_override=admin_override,
            )
        except BankError as err:
            self._fail(err)
            return None
        self._notifier.notify("Account Updated Successfully!")
        return account

    def close_account(self, account_no) -> Account | None:
        try:
            account = self._ledger.close(parse_account_no(account_no))
        except BankError as err:
            self._fail(err)
            return None
        self._notifier.notify("Account Deleted Successfully!")
        return account

    def dashboard(self) -> DashboardSummary:
        return self._dashboard.refresh()
