"""Bank service for business logic layer."""

import logging

from bankledger.models.account import AccountKind, AnyAccount
from bankledger.models.exceptions import AccountNotFoundError, BankError
from bankledger.repositories.account_repo import AccountRepository
from bankledger.services import account_rules

logger = logging.getLogger(__name__)


class BankService:
    """Service layer for banking operations."""

    def __init__(self, account_repo: AccountRepository):
        """
        Initialize the BankService with a repository.

        Args:
            account_repo: Repository owning the accounts
        """
        self._account_repo = account_repo

    def open_account(self, account_no: int, name: str, initial_balance: float) -> AnyAccount:
        """Open a plain account that earns no interest."""
        return self._account_repo.create(AccountKind.BASIC, account_no, name, initial_balance)

    def open_savings_account(
        self, account_no: int, name: str, initial_balance: float, interest_rate: float
    ) -> AnyAccount:
        """
        Open a savings account.

        Args:
            account_no: The account number (not checked for uniqueness)
            name: The account holder's name
            initial_balance: The opening balance
            interest_rate: Annual interest rate in percent

        Returns:
            The created SavingsAccount
        """
        return self._account_repo.create(
            AccountKind.SAVINGS,
            account_no,
            name,
            initial_balance,
            interest_rate=interest_rate,
        )

    def open_checking_account(
        self, account_no: int, name: str, initial_balance: float, overdraft_limit: float
    ) -> AnyAccount:
        """
        Open a checking account.

        Args:
            account_no: The account number (not checked for uniqueness)
            name: The account holder's name
            initial_balance: The opening balance
            overdraft_limit: How far below zero the balance may go

        Returns:
            The created CheckingAccount
        """
        return self._account_repo.create(
            AccountKind.CHECKING,
            account_no,
            name,
            initial_balance,
            overdraft_limit=overdraft_limit,
        )

    def open_fixed_deposit_account(
        self,
        account_no: int,
        name: str,
        initial_balance: float,
        term: int,
        interest_rate: float,
    ) -> AnyAccount:
        """
        Open a fixed deposit account.

        Args:
            account_no: The account number (not checked for uniqueness)
            name: The account holder's name
            initial_balance: The opening balance
            term: Duration in months
            interest_rate: Annual interest rate in percent

        Returns:
            The created FixedDepositAccount
        """
        return self._account_repo.create(
            AccountKind.FIXED_DEPOSIT,
            account_no,
            name,
            initial_balance,
            term=term,
            interest_rate=interest_rate,
        )

    def get_account(self, account_no: int) -> AnyAccount:
        """
        Resolve an account number to the first matching account.

        Raises:
            AccountNotFoundError: If no account matches
        """
        account = self._account_repo.find_by_account_no(account_no)
        if account is None:
            logger.warning(
                "No account matches %s on %s",
                account_no,
                self._account_repo.lookup_field.value,
            )
            raise AccountNotFoundError(f"Account {account_no} not found")
        return account

    def get_balance(self, account_no: int) -> float:
        """
        Get the balance for an account.

        Raises:
            AccountNotFoundError: If the account doesn't exist
        """
        return account_rules.get_balance(self.get_account(account_no))

    def deposit(self, account_no: int, amount: float) -> AnyAccount:
        """
        Deposit funds into an account.

        Args:
            account_no: The number used to look the account up
            amount: The amount to deposit (must be positive)

        Returns:
            The credited account

        Raises:
            AccountNotFoundError: If the account doesn't exist
            InvalidAmountError: If the amount is zero or negative
        """
        account = self.get_account(account_no)
        try:
            account_rules.deposit(account, amount)
        except BankError as err:
            logger.warning("Deposit of %s to %s rejected: %s", amount, account.account_no, err)
            raise
        logger.info("Deposited %s to %s, balance %s", amount, account.account_no, account.balance)
        return account

    def withdraw(self, account_no: int, amount: float) -> AnyAccount:
        """
        Withdraw funds from an account.

        Args:
            account_no: The number used to look the account up
            amount: The amount to withdraw (must be positive)

        Returns:
            The debited account

        Raises:
            AccountNotFoundError: If the account doesn't exist
            InvalidAmountError: If the amount is zero or negative
            InsufficientBalanceError: If the amount exceeds what the variant allows
        """
        account = self.get_account(account_no)
        try:
            account_rules.withdraw(account, amount)
        except BankError as err:
            logger.warning("Withdrawal of %s from %s rejected: %s", amount, account.account_no, err)
            raise
        logger.info("Withdrew %s from %s, balance %s", amount, account.account_no, account.balance)
        return account

    def list_accounts(self) -> list[AnyAccount]:
        return list(self._account_repo)

    def account_reports(self) -> list[list[str]]:
        """Display lines for every account, in creation order."""
        return self._account_repo.for_each(account_rules.describe)

    def interest_reports(self) -> list[str]:
        """Interest statement for every account, in creation order."""
        return self._account_repo.for_each(account_rules.interest_statement)

    def close(self) -> int:
        """Release all accounts; returns how many were released."""
        return self._account_repo.teardown()
