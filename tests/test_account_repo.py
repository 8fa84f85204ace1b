"""Tests for AccountRepository."""

import pytest

from bankledger.models.account import (
    Account,
    AccountKind,
    CheckingAccount,
    FixedDepositAccount,
    SavingsAccount,
)
from bankledger.repositories.account_repo import AccountRepository, LookupField


@pytest.fixture
def account_repo():
    """Create an empty AccountRepository looking accounts up by number."""
    return AccountRepository()


@pytest.fixture
def legacy_repo():
    """Create an empty AccountRepository using the legacy balance lookup."""
    return AccountRepository(lookup_field=LookupField.BALANCE)


def test_create_each_kind(account_repo):
    """create builds the requested variant and appends it."""
    savings = account_repo.create(AccountKind.SAVINGS, 1, "Alice", 100.0, interest_rate=5.0)
    checking = account_repo.create(AccountKind.CHECKING, 2, "Bob", 0.0, overdraft_limit=50.0)
    fixed = account_repo.create(AccountKind.FIXED_DEPOSIT, 3, "Carol", 1200.0, term=6, interest_rate=6.0)
    basic = account_repo.create(AccountKind.BASIC, 4, "Dave", 10.0)

    assert isinstance(savings, SavingsAccount)
    assert isinstance(checking, CheckingAccount)
    assert isinstance(fixed, FixedDepositAccount)
    assert isinstance(basic, Account)
    assert list(account_repo) == [savings, checking, fixed, basic]
    assert len(account_repo) == 4


def test_create_accepts_kind_value(account_repo):
    account = account_repo.create("checking", 7, "Eve", 5.0, overdraft_limit=1.0)
    assert isinstance(account, CheckingAccount)


def test_create_unknown_kind_raises(account_repo):
    with pytest.raises(ValueError, match="Unknown account kind"):
        account_repo.create("brokerage", 1, "Alice", 0.0)
    assert len(account_repo) == 0


def test_create_accepts_duplicates_and_negative_balance(account_repo):
    """No uniqueness or sign validation happens at creation."""
    first = account_repo.create(AccountKind.BASIC, 1, "Alice", -20.0)
    second = account_repo.create(AccountKind.BASIC, 1, "Bob", 30.0)

    assert len(account_repo) == 2
    assert first.balance == -20.0
    assert second.account_no == first.account_no


def test_find_by_account_no(account_repo):
    account_repo.create(AccountKind.BASIC, 1, "Alice", 100.0)
    bob = account_repo.create(AccountKind.BASIC, 2, "Bob", 1.0)

    assert account_repo.find_by_account_no(2) is bob


def test_find_by_account_no_not_found(account_repo):
    """Should return None."""
    account_repo.create(AccountKind.BASIC, 1, "Alice", 2.0)
    assert account_repo.find_by_account_no(2) is None


def test_find_returns_first_match(account_repo):
    first = account_repo.create(AccountKind.BASIC, 5, "Alice", 1.0)
    account_repo.create(AccountKind.BASIC, 5, "Bob", 2.0)

    assert account_repo.find_by_account_no(5) is first


def test_legacy_lookup_compares_balance(legacy_repo):
    """The legacy lookup matches the number against balances, not account numbers."""
    alice = legacy_repo.create(AccountKind.BASIC, 1, "Alice", 100.0)
    legacy_repo.create(AccountKind.BASIC, 100, "Bob", 5.0)

    assert legacy_repo.find_by_account_no(100) is alice
    assert legacy_repo.find_by_account_no(1) is None


def test_lookup_field_accepts_value(account_repo):
    repo = AccountRepository(lookup_field="balance")
    assert repo.lookup_field is LookupField.BALANCE
    assert account_repo.lookup_field is LookupField.ACCOUNT_NO


def test_for_each_visits_in_insertion_order(account_repo):
    account_repo.create(AccountKind.BASIC, 3, "C", 0.0)
    account_repo.create(AccountKind.BASIC, 1, "A", 0.0)
    account_repo.create(AccountKind.BASIC, 2, "B", 0.0)

    assert account_repo.for_each(lambda account: account.name) == ["C", "A", "B"]


def test_for_each_on_empty_repo(account_repo):
    assert account_repo.for_each(lambda account: account) == []


@pytest.mark.parametrize("count", [0, 1, 5])
def test_teardown_releases_every_account_once(account_repo, count):
    for n in range(count):
        account_repo.create(AccountKind.BASIC, n, f"holder{n}", 0.0)

    assert account_repo.teardown() == count
    assert len(account_repo) == 0
    # A second teardown has nothing left to release
    assert account_repo.teardown() == 0


def test_iteration_is_a_snapshot(account_repo):
    account_repo.create(AccountKind.BASIC, 1, "A", 0.0)
    accounts = iter(account_repo)
    account_repo.create(AccountKind.BASIC, 2, "B", 0.0)

    assert [a.account_no for a in accounts] == [1]
