"""Account data model."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class AccountType(str, Enum):
    """Kind of account, stored as its one-letter code."""

    SAVINGS = "S"
    CURRENT = "C"

    @property
    def label(self) -> str:
        """Human readable name of the account type."""
        return "Savings" if self is AccountType.SAVINGS else "Current"


@dataclass
class Account:
    """Represents a bank account."""

    account_no: int
    holder_name: str
    account_type: AccountType
    balance: int

    def to_dict(self) -> dict[str, Any]:
        """
        Convert the account to its stored record.

        Returns:
            A dict with the accountNumber, holderName, accountType and balance keys
        """
        return {
            "accountNumber": self.account_no,
            "holderName": self.holder_name,
            "accountType": self.account_type.value,
            "balance": self.balance,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Account":
        """
        Build an account from a stored record.

        Args:
            data: A dict as produced by to_dict()

        Returns:
            The decoded Account

        Raises:
            KeyError: If a field is missing
            ValueError: If the type code is unknown
            TypeError: If a number field is not an integer
        """
        account_no = data["accountNumber"]
        balance = data["balance"]
        for value in (account_no, balance):
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"Expected an integer, got {value!r}")
        holder_name = data["holderName"]
        if not isinstance(holder_name, str):
            raise TypeError(f"Expected a string, got {holder_name!r}")

        return cls(
            account_no=account_no,
            holder_name=holder_name,
            account_type=AccountType(data["accountType"]),
            balance=balance,
        )
