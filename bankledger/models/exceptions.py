"""Custom exceptions for the banking system."""


class BankError(Exception):
    """Base exception for all banking-related errors."""
    pass


class AccountNotFoundError(BankError):
    """Raised when no account matches a lookup."""
    pass


class InvalidAmountError(BankError):
    """Raised when an invalid amount is provided (e.g., zero or negative amount)."""
    pass


class InsufficientBalanceError(BankError):
    """Raised when a withdrawal exceeds the available balance."""
    pass


class OverdraftLimitExceededError(InsufficientBalanceError):
    """Raised when a checking withdrawal exceeds balance plus overdraft limit."""
    pass


class InvalidChoiceError(BankError):
    """Raised when a menu selection is out of range."""
    pass
