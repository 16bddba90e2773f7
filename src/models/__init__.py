"""Data models for the account ledger."""

from .account import Account, AccountType
from .notification import Notification
from .summary import DashboardSummary
from .exceptions import (
    BankError,
    ValidationError,
    InvalidAmountError,
    AccountNotFoundError,
    AccountAlreadyExistsError,
    InsufficientBalanceError,
    CorruptStateError,
)

__all__ = [
    "Account",
    "AccountType",
    "Notification",
    "DashboardSummary",
    "BankError",
    "ValidationError",
    "InvalidAmountError",
    "AccountNotFoundError",
    "AccountAlreadyExistsError",
    "InsufficientBalanceError",
    "CorruptStateError",
]
