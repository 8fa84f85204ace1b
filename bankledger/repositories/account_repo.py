"""Account repository holding accounts in memory."""

import logging
from enum import Enum
from typing import Any, Callable, Iterator, TypeVar

from bankledger.models.account import ACCOUNT_TYPES, AccountKind, AnyAccount

logger = logging.getLogger(__name__)

T = TypeVar("T")


class LookupField(str, Enum):
    """Account attribute compared against the number supplied to a lookup."""

    ACCOUNT_NO = "account_no"
    # Legacy behaviour: the number typed at the prompt is matched against balances.
    BALANCE = "balance"


class AccountRepository:
    """Repository owning every account created during the process lifetime."""

    def __init__(self, lookup_field: LookupField = LookupField.ACCOUNT_NO):
        """
        Initialize an empty repository.

        Args:
            lookup_field: Attribute that find_by_account_no compares against
        """
        self._accounts: list[AnyAccount] = []
        self._lookup_field = LookupField(lookup_field)

    @property
    def lookup_field(self) -> LookupField:
        return self._lookup_field

    def create(
        self,
        kind: AccountKind,
        account_no: int,
        name: str,
        balance: float,
        **fields: Any,
    ) -> AnyAccount:
        """
        Build an account of the requested kind and append it.

        Duplicate account numbers and negative opening balances are accepted.

        Args:
            kind: The account variant to build
            account_no: The account number
            name: The account holder's name
            balance: The opening balance
            **fields: Variant specific fields (interest_rate, overdraft_limit, term)

        Returns:
            The created account

        Raises:
            ValueError: If kind is not a known account variant
        """
        try:
            account_type = ACCOUNT_TYPES[AccountKind(kind)]
        except (KeyError, ValueError):
            raise ValueError(f"Unknown account kind: {kind!r}")

        account = account_type(account_no=account_no, name=name, balance=balance, **fields)
        self.add(account)
        return account

    def add(self, account: AnyAccount) -> None:
        """Append an already built account."""
        self._accounts.append(account)
        logger.info("Registered %s account %s for %s", account.kind.value, account.account_no, account.name)

    def find_by_account_no(self, account_no: int) -> AnyAccount | None:
        """
        Find the first account whose lookup field equals account_no.

        Args:
            account_no: The number to search for

        Returns:
            The first matching account in insertion order, None otherwise
        """
        field_name = self._lookup_field.value
        for account in self._accounts:
            if getattr(account, field_name) == account_no:
                return account
        return None

    def for_each(self, visitor: Callable[[AnyAccount], T]) -> list[T]:
        """Apply visitor to every account in insertion order and collect the results."""
        return [visitor(account) for account in self._accounts]

    def teardown(self) -> int:
        """
        Release every owned account.

        Returns:
            The number of accounts released; 0 when already torn down
        """
        released = len(self._accounts)
        self._accounts.clear()
        logger.info("Released %d account(s)", released)
        return released

    def __iter__(self) -> Iterator[AnyAccount]:
        return iter(tuple(self._accounts))

    def __len__(self) -> int:
        return len(self._accounts)
