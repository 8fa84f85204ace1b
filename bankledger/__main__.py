import logging
import sys

from dotenv import load_dotenv

from bankledger.commands.menu import BankMenu
from bankledger.repositories.account_repo import AccountRepository
from bankledger.services.bank_service import BankService
from config.settings import Settings


def configure_logging(settings: Settings) -> logging.Logger:
    # Log to a file so records never interleave with the menu on stdout
    logger = logging.getLogger('bankledger')
    logger.setLevel(settings.log_level)
    handler = logging.FileHandler(filename=settings.log_file, encoding='utf-8', mode='w')
    handler.setFormatter(logging.Formatter('%(asctime)s:%(levelname)s:%(name)s: %(message)s'))
    logger.addHandler(handler)
    return logger


def main() -> int:
    load_dotenv()
    settings = Settings.load()
    logger = configure_logging(settings)
    logger.info("Starting console bank (lookup by %s)", settings.lookup_field.value)

    service = BankService(AccountRepository(lookup_field=settings.lookup_field))
    return BankMenu(service, settings).run()


if __name__ == '__main__':
    sys.exit(main())
