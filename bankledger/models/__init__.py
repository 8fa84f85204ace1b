"""Data models for the banking system."""

from .account import (
    ACCOUNT_TYPES,
    Account,
    AccountKind,
    AnyAccount,
    CheckingAccount,
    FixedDepositAccount,
    SavingsAccount,
)
from .exceptions import (
    BankError,
    AccountNotFoundError,
    InvalidAmountError,
    InsufficientBalanceError,
    OverdraftLimitExceededError,
    InvalidChoiceError,
)

__all__ = [
    "ACCOUNT_TYPES",
    "Account",
    "AccountKind",
    "AnyAccount",
    "CheckingAccount",
    "FixedDepositAccount",
    "SavingsAccount",
    "BankError",
    "AccountNotFoundError",
    "InvalidAmountError",
    "InsufficientBalanceError",
    "OverdraftLimitExceededError",
    "InvalidChoiceError",
]
