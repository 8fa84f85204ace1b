"""Deposit, withdrawal, interest and display rules for each account variant."""

from bankledger.models.account import (
    Account,
    AnyAccount,
    CheckingAccount,
    FixedDepositAccount,
    SavingsAccount,
)
from bankledger.models.exceptions import (
    InsufficientBalanceError,
    InvalidAmountError,
    OverdraftLimitExceededError,
)

NOT_APPLICABLE = "Interest calculation not applicable for this account type."


def format_amount(value: float) -> str:
    """Render a monetary value with exactly two fractional digits."""
    return f"{value:.2f}"


def get_balance(account: AnyAccount) -> float:
    return account.balance


def deposit(account: AnyAccount, amount: float) -> float:
    """
    Add amount to the balance.

    Args:
        account: The account to credit
        amount: The amount to deposit (must be positive)

    Returns:
        The new balance

    Raises:
        InvalidAmountError: If the amount is zero or negative
    """
    if not amount > 0:
        raise InvalidAmountError("Invalid deposit amount.")
    account.balance += amount
    return account.balance


def withdrawal_limit(account: AnyAccount) -> float:
    """Largest amount that may currently be withdrawn."""
    match account:
        case CheckingAccount():
            return account.balance + account.overdraft_limit
        case Account() | SavingsAccount() | FixedDepositAccount():
            return account.balance
        case _:
            raise TypeError(f"Not an account: {account!r}")


def withdraw(account: AnyAccount, amount: float) -> float:
    """
    Subtract amount from the balance if the variant allows it.

    Savings, fixed deposit and plain accounts cannot go below zero. Checking
    accounts may go down to minus their overdraft limit.

    Args:
        account: The account to debit
        amount: The amount to withdraw (must be positive)

    Returns:
        The new balance

    Raises:
        InvalidAmountError: If the amount is zero or negative
        InsufficientBalanceError: If the amount exceeds the withdrawal limit
        OverdraftLimitExceededError: If a checking withdrawal exceeds the overdraft limit
    """
    limit = withdrawal_limit(account)
    if isinstance(account, CheckingAccount):
        message = "Withdrawal exceeds overdraft limit or invalid amount."
        over_limit_error = OverdraftLimitExceededError
    else:
        message = "Insufficient balance or invalid amount."
        over_limit_error = InsufficientBalanceError

    if not amount > 0:
        raise InvalidAmountError(message)
    if amount > limit:
        raise over_limit_error(message)

    account.balance -= amount
    return account.balance


def calculate_interest(account: AnyAccount) -> float | None:
    """
    Compute interest on the current balance without crediting it.

    Returns:
        The interest amount, or None when the variant earns no interest
    """
    match account:
        case SavingsAccount():
            return account.balance * (account.interest_rate / 100.0)
        case FixedDepositAccount():
            return account.balance * (account.interest_rate / 100.0) * (account.term / 12.0)
        case Account() | CheckingAccount():
            return None
        case _:
            raise TypeError(f"Not an account: {account!r}")


def interest_statement(account: AnyAccount) -> str:
    interest = calculate_interest(account)
    match account:
        case SavingsAccount():
            return f"Savings Account Interest: {format_amount(interest)}"
        case FixedDepositAccount():
            return f"Fixed Deposit Interest: {format_amount(interest)}"
        case _:
            return NOT_APPLICABLE


def describe(account: AnyAccount) -> list[str]:
    """Lines shown for an account in the account listing."""
    match account:
        case CheckingAccount():
            extra = [f"Overdraft Limit: {format_amount(account.overdraft_limit)}"]
        case FixedDepositAccount():
            extra = [
                f"Term: {account.term} months",
                f"Interest Rate: {format_amount(account.interest_rate)}%",
            ]
        case Account() | SavingsAccount():
            extra = []
        case _:
            raise TypeError(f"Not an account: {account!r}")
    return [
        f"Account Number: {account.account_no}",
        f"Account Holder: {account.name}",
        f"Balance: {format_amount(account.balance)}",
        *extra,
    ]
