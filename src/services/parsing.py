"""Parsing of user-supplied field values."""

from src.models.account import AccountType
from src.models.exceptions import InvalidAmountError, ValidationError

_TYPE_ALIASES = {
    "S": AccountType.SAVINGS,
    "SAVINGS": AccountType.SAVINGS,
    "C": AccountType.CURRENT,
    "CURRENT": AccountType.CURRENT,
}


def parse_account_no(value: str | int) -> int:
    """
    Parse an account number.

    Raises:
        ValidationError: If the value is not a whole number
    """
    try:
        return _parse_int(value)
    except ValueError:
        raise ValidationError(f"Invalid account number: {value!r}")


def parse_amount(value: str | int) -> int:
    """
    Parse a whole currency amount.

    Sign checks are left to the ledger, which knows which operations
    accept which amounts.

    Raises:
        InvalidAmountError: If the value is not a whole number
    """
    try:
        return _parse_int(value)
    except ValueError:
        raise InvalidAmountError(f"Invalid amount: {value!r}. Use whole units only.")


def parse_account_type(value: str | AccountType) -> AccountType:
    """
    Parse an account type from its code or name, case-insensitively.

    Raises:
        ValidationError: If the value names no known type
    """
    if isinstance(value, AccountType):
        return value
    account_type = _TYPE_ALIASES.get(str(value).strip().upper())
    if account_type is None:
        raise ValidationError(
            f"Invalid account type: {value!r}. Use S (Savings) or C (Current)."
        )
    return account_type


def _parse_int(value: str | int) -> int:
    if isinstance(value, bool):
        raise ValueError(value)
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if not text:
        raise ValueError(value)
    return int(text)
