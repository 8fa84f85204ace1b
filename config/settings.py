"""Configuration management for the console bank."""
import logging
import os
from dataclasses import dataclass

from bankledger.repositories.account_repo import LookupField


@dataclass
class Settings:
    """Configuration settings for the console bank.

    Every field has a default, so the program runs with no environment at all.
    """

    # Account lookup used by deposit and withdraw
    lookup_field: LookupField = LookupField.ACCOUNT_NO

    # Logging Configuration
    log_file: str = 'bankledger.log'
    log_level: str = 'DEBUG'

    # Console layout
    divider: str = '-' * 21

    @classmethod
    def load(cls) -> 'Settings':
        """Load settings from environment variables.

        Returns:
            Settings: A Settings instance with values from environment variables.

        Raises:
            ValueError: If an environment variable holds an unsupported value.
        """
        defaults = cls()

        lookup_value = os.getenv('BANK_LOOKUP_FIELD', defaults.lookup_field.value)
        try:
            lookup_field = LookupField(lookup_value.strip().lower())
        except ValueError:
            choices = ', '.join(field.value for field in LookupField)
            raise ValueError(f"BANK_LOOKUP_FIELD must be one of: {choices}")

        log_level = os.getenv('BANK_LOG_LEVEL', defaults.log_level).strip().upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"BANK_LOG_LEVEL is not a valid log level: {log_level}")

        return cls(
            lookup_field=lookup_field,
            log_file=os.getenv('BANK_LOG_FILE', defaults.log_file),
            log_level=log_level,
        )
