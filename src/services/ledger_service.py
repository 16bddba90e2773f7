"""Ledger service for business logic layer."""

import logging

from src.models.account import Account, AccountType
from src.models.exceptions import (
    AccountAlreadyExistsError,
    AccountNotFoundError,
    InsufficientBalanceError,
    InvalidAmountError,
    ValidationError,
)
from src.repositories.account_store import AccountStore

logger = logging.getLogger(__name__)


class LedgerService:
    """Service layer for account operations."""

    def __init__(
        self,
        store: AccountStore,
        savings_minimum: int = 500,
        current_minimum: int = 1000,
    ):
        """
        Initialize the LedgerService with its store.

        Args:
            store: Persistent store for the account collection
            savings_minimum: Lowest balance a Savings account may hold (default: 500)
            current_minimum: Lowest balance a Current account may hold (default: 1000)
        """
        self._store = store
        self._minimums = {
            AccountType.SAVINGS: savings_minimum,
            AccountType.CURRENT: current_minimum,
        }

    def minimum_balance(self, account_type: AccountType) -> int:
        """Return the balance floor for an account type."""
        return self._minimums[account_type]

    def _minimum_deposit_message(self) -> str:
        return (
            f"Min. deposit: {self._minimums[AccountType.SAVINGS]} (Savings) / "
            f"{self._minimums[AccountType.CURRENT]} (Current)."
        )

    def _find(self, accounts: list[Account], account_no: int) -> Account:
        """
        Look up an account in a loaded collection.

        Raises:
            AccountNotFoundError: If no account has this number
        """
        index = {account.account_no: account for account in accounts}
        account = index.get(account_no)
        if account is None:
            raise AccountNotFoundError(f"Account Not Found. (#{account_no})")
        return account

    def _validate_account_no(self, account_no: int) -> None:
        if isinstance(account_no, bool) or not isinstance(account_no, int):
            raise ValidationError(f"Account number must be a whole number, got {account_no!r}.")

    def _validate_whole(self, amount: int) -> None:
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise InvalidAmountError(f"Amount must be a whole number, got {amount!r}.")

    def _validate_account_type(self, account_type: AccountType) -> None:
        if not isinstance(account_type, AccountType):
            raise ValidationError(f"Invalid account type: {account_type!r}.")

    def _validate_amount(self, amount: int) -> None:
        self._validate_whole(amount)
        if amount <= 0:
            raise InvalidAmountError(f"Amount must be greater than zero, got {amount}.")

    def _validate_holder_name(self, holder_name: str) -> str:
        if not isinstance(holder_name, str) or not holder_name.strip():
            raise ValidationError("Account holder name cannot be empty.")
        return holder_name.strip()

    def create(
        self,
        account_no: int,
        holder_name: str,
        account_type: AccountType,
        initial_deposit: int,
    ) -> Account:
        """
        Open a new account.

        Args:
            account_no: The caller-assigned account number
            holder_name: The account holder's name
            account_type: Savings or Current
            initial_deposit: Opening balance, at least the type minimum

        Returns:
            The created Account

        Raises:
            ValidationError: If the name is blank, the account number or type is
                malformed, or the deposit is below the minimum
            InvalidAmountError: If the deposit is not a whole number
            AccountAlreadyExistsError: If the account number is taken
        """
        self._validate_account_no(account_no)
        holder_name = self._validate_holder_name(holder_name)
        self._validate_account_type(account_type)
        self._validate_whole(initial_deposit)
        if initial_deposit < self.minimum_balance(account_type):
            raise ValidationError(self._minimum_deposit_message())

        accounts = self._store.load()
        if any(account.account_no == account_no for account in accounts):
            raise AccountAlreadyExistsError(f"Account number {account_no} already exists.")

        account = Account(
            account_no=account_no,
            holder_name=holder_name,
            account_type=account_type,
            balance=initial_deposit,
        )
        accounts.append(account)
        self._store.save(accounts)

        logger.info("Created %s account #%d", account_type.label, account_no)
        return account

    def deposit(self, account_no: int, amount: int) -> int:
        """
        Deposit funds into an account.

        Args:
            account_no: The account to deposit to
            amount: A positive whole amount

        Returns:
            The new balance

        Raises:
            InvalidAmountError: If the amount is not a positive integer
            AccountNotFoundError: If the account doesn't exist
        """
        self._validate_amount(amount)

        accounts = self._store.load()
        account = self._find(accounts, account_no)
        account.balance += amount
        self._store.save(accounts)

        logger.info("Deposited %d into #%d", amount, account_no)
        return account.balance

    def withdraw(self, account_no: int, amount: int) -> int:
        """
        Withdraw funds from an account.

        The balance may not drop below the floor for the account type.

        Args:
            account_no: The account to withdraw from
            amount: A positive whole amount

        Returns:
            The new balance

        Raises:
            InvalidAmountError: If the amount is not a positive integer
            AccountNotFoundError: If the account doesn't exist
            InsufficientBalanceError: If the withdrawal would breach the floor
        """
        self._validate_amount(amount)

        accounts = self._store.load()
        account = self._find(accounts, account_no)
        minimum = self.minimum_balance(account.account_type)
        if account.balance - amount < minimum:
            raise InsufficientBalanceError(
                "Insufficient balance for this withdrawal. "
                f"({account.balance} - {amount} < {minimum})"
            )
        account.balance -= amount
        self._store.save(accounts)

        logger.info("Withdrew %d from #%d", amount, account_no)
        return account.balance

    def enquire(self, account_no: int) -> Account:
        """
        Look up a single account.

        Raises:
            AccountNotFoundError: If the account doesn't exist
        """
        return self._find(self._store.load(), account_no)

    def list_all(self) -> list[Account]:
        """Return every account in stored order."""
        return self._store.load()

    def modify(
        self,
        account_no: int,
        holder_name: str,
        account_type: AccountType,
        balance: int,
        *,
        admin_override: bool = True,
    ) -> Account:
        """
        Replace the holder name, type and balance of an account.

        With admin_override the new balance is accepted even when it is below
        the floor for the new type; such overrides are logged.

        Args:
            account_no: The account to modify
            holder_name: The new holder name
            account_type: The new account type
            balance: The new balance
            admin_override: Skip the minimum balance check (default: True)

        Returns:
            The updated Account

        Raises:
            AccountNotFoundError: If the account doesn't exist
            ValidationError: If the name is blank, the account number or type is
                malformed, or the balance is below the floor and admin_override is off
            InvalidAmountError: If the balance is not a whole number
        """
        self._validate_account_no(account_no)
        holder_name = self._validate_holder_name(holder_name)
        self._validate_account_type(account_type)
        self._validate_whole(balance)
        minimum = self.minimum_balance(account_type)
        if balance < minimum and not admin_override:
            raise ValidationError(
                f"Balance {balance} is below the {account_type.label} minimum of {minimum}."
            )

        accounts = self._store.load()
        account = self._find(accounts, account_no)
        account.holder_name = holder_name
        account.account_type = account_type
        account.balance = balance
        self._store.save(accounts)

        if balance < minimum:
            logger.warning(
                "Administrative override: #%d set to %d, below the %s minimum of %d",
                account_no,
                balance,
                account_type.label,
                minimum,
            )
        logger.info("Modified account #%d", account_no)
        return account

    def close(self, account_no: int) -> Account:
        """
        Remove an account.

        Returns:
            The removed Account

        Raises:
            AccountNotFoundError: If the account doesn't exist
        """
        accounts = self._store.load()
        account = self._find(accounts, account_no)
        remaining = [a for a in accounts if a.account_no != account_no]
        self._store.save(remaining)

        logger.info("Closed account #%d", account_no)
        return account
