"""Account data models."""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union


class AccountKind(str, Enum):
    """Tag identifying an account variant."""

    BASIC = "basic"
    SAVINGS = "savings"
    CHECKING = "checking"
    FIXED_DEPOSIT = "fixed_deposit"


@dataclass
class Account:
    """Represents a plain bank account with no interest."""

    kind: ClassVar[AccountKind] = AccountKind.BASIC

    account_no: int
    name: str
    balance: float


@dataclass
class SavingsAccount:
    """Represents a savings account earning simple annual interest."""

    kind: ClassVar[AccountKind] = AccountKind.SAVINGS

    account_no: int
    name: str
    balance: float
    interest_rate: float


@dataclass
class CheckingAccount:
    """Represents a checking account that may go below zero by its overdraft limit."""

    kind: ClassVar[AccountKind] = AccountKind.CHECKING

    account_no: int
    name: str
    balance: float
    overdraft_limit: float


@dataclass
class FixedDepositAccount:
    """Represents a fixed deposit whose interest is pro-rated over its term."""

    kind: ClassVar[AccountKind] = AccountKind.FIXED_DEPOSIT

    account_no: int
    name: str
    balance: float
    term: int
    interest_rate: float


AnyAccount = Union[Account, SavingsAccount, CheckingAccount, FixedDepositAccount]

ACCOUNT_TYPES: dict[AccountKind, type] = {
    AccountKind.BASIC: Account,
    AccountKind.SAVINGS: SavingsAccount,
    AccountKind.CHECKING: CheckingAccount,
    AccountKind.FIXED_DEPOSIT: FixedDepositAccount,
}
