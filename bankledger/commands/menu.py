"""Console menu driving the bank service."""

import logging
from typing import Callable

from bankledger.models.exceptions import AccountNotFoundError, BankError, InvalidChoiceError
from bankledger.services.account_rules import format_amount
from bankledger.services.bank_service import BankService
from config.settings import Settings

logger = logging.getLogger(__name__)

MENU_LINES = (
    "1. Create Savings Account",
    "2. Create Checking Account",
    "3. Create Fixed Deposit Account",
    "4. Deposit Money",
    "5. Withdraw Money",
    "6. Display Account Info",
    "7. Calculate Interest",
    "8. Exit",
)
EXIT_CHOICE = 8


class BankMenu:
    """Numbered menu that reads choices from stdin and prints results."""

    def __init__(self, service: BankService, settings: Settings | None = None):
        self.service = service
        self.settings = settings or Settings()
        self._commands: dict[int, Callable[[], None]] = {
            1: self.create_savings,
            2: self.create_checking,
            3: self.create_fixed_deposit,
            4: self.deposit,
            5: self.withdraw,
            6: self.display_accounts,
            7: self.calculate_interest,
            EXIT_CHOICE: self.exit,
        }

    def display_menu(self) -> None:
        print("\n--- Banking System Menu ---")
        for line in MENU_LINES:
            print(line)

    def run(self) -> int:
        """
        Loop until the user exits or input ends.

        Returns:
            The process exit code, always 0
        """
        while True:
            self.display_menu()
            try:
                choice = self._read_choice()
                logger.debug("Menu choice %s", choice)
                self._command_for(choice)()
            except EOFError:
                print()
                logger.info("Input closed, shutting down")
                self.service.close()
                return 0
            except ValueError:
                print("Invalid input. Please enter a number.")
                continue
            except AccountNotFoundError:
                continue
            except BankError as err:
                print(err)
                continue

            if choice == EXIT_CHOICE:
                return 0

    def _read_choice(self) -> int | None:
        raw = input("Enter your choice: ").strip()
        try:
            return int(raw)
        except ValueError:
            return None

    def _command_for(self, choice: int | None) -> Callable[[], None]:
        command = self._commands.get(choice)
        if command is None:
            raise InvalidChoiceError("Invalid choice. Please try again.")
        return command

    def _read_common_fields(self) -> tuple[int, str, float]:
        account_no = int(input("Enter Account Number: ").strip())
        name = input("Enter Account Holder Name: ").strip()
        initial_balance = float(input("Enter Initial Balance: ").strip())
        return account_no, name, initial_balance

    def create_savings(self) -> None:
        account_no, name, initial_balance = self._read_common_fields()
        interest_rate = float(input("Enter Interest Rate (%): ").strip())
        self.service.open_savings_account(account_no, name, initial_balance, interest_rate)
        print("Savings Account created successfully!")

    def create_checking(self) -> None:
        account_no, name, initial_balance = self._read_common_fields()
        overdraft_limit = float(input("Enter Overdraft Limit: ").strip())
        self.service.open_checking_account(account_no, name, initial_balance, overdraft_limit)
        print("Checking Account created successfully!")

    def create_fixed_deposit(self) -> None:
        account_no, name, initial_balance = self._read_common_fields()
        term = int(input("Enter Term (in months): ").strip())
        interest_rate = float(input("Enter Interest Rate (%): ").strip())
        self.service.open_fixed_deposit_account(account_no, name, initial_balance, term, interest_rate)
        print("Fixed Deposit Account created successfully!")

    def deposit(self) -> None:
        account_no = int(input("Enter Account Number: ").strip())
        amount = float(input("Enter Deposit Amount: ").strip())
        account = self.service.deposit(account_no, amount)
        print(f"Deposited: {format_amount(amount)}. New balance: {format_amount(account.balance)}")

    def withdraw(self) -> None:
        account_no = int(input("Enter Account Number: ").strip())
        amount = float(input("Enter Withdrawal Amount: ").strip())
        account = self.service.withdraw(account_no, amount)
        print(f"Withdrawn: {format_amount(amount)}. New balance: {format_amount(account.balance)}")

    def display_accounts(self) -> None:
        for lines in self.service.account_reports():
            for line in lines:
                print(line)
            print(self.settings.divider)

    def calculate_interest(self) -> None:
        for statement in self.service.interest_reports():
            print(statement)
            print(self.settings.divider)

    def exit(self) -> None:
        print("Exiting the Banking System. Goodbye!")
        self.service.close()
