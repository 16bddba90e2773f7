"""Custom exceptions for the account ledger."""


class BankError(Exception):
    """Base exception for all banking-related errors."""
    pass


class ValidationError(BankError):
    """Raised when input violates a domain rule (e.g., minimum deposit)."""
    pass


class InvalidAmountError(ValidationError):
    """Raised when an amount is not a positive whole number."""
    pass


class AccountNotFoundError(BankError):
    """Raised when an account cannot be found."""
    pass


class AccountAlreadyExistsError(BankError):
    """Raised when attempting to create an account that already exists."""
    pass


class InsufficientBalanceError(BankError):
    """Raised when a withdrawal would take the balance below its floor."""
    pass


class CorruptStateError(BankError):
    """Raised when the stored account collection cannot be decoded."""
    pass
