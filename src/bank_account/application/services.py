from decimal import Decimal

import structlog

from bank_account.config import Settings
from bank_account.domain.exceptions import DomainError
from bank_account.domain.models import Account, WithdrawPolicy
from bank_account.domain.validation import EmailPrefixRule


logger = structlog.get_logger()


class AccountService:
    """Opens accounts under one set of rules and logs every balance change."""

    def __init__(
        self,
        withdraw_policy: WithdrawPolicy = WithdrawPolicy.STRICT,
        email_rule: EmailPrefixRule = EmailPrefixRule.ALNUM,
    ) -> None:
        self.withdraw_policy = withdraw_policy
        self.email_rule = email_rule

    @classmethod
    def from_settings(cls, settings: Settings) -> "AccountService":
        return cls(
            withdraw_policy=settings.withdraw_policy,
            email_rule=settings.email_prefix_rule,
        )

    def open_account(self, email: str, starting_balance: Decimal | int | float) -> Account:
        log = logger.bind(email=email, starting_balance=str(starting_balance))

        try:
            account = Account(
                email,
                starting_balance,
                withdraw_policy=self.withdraw_policy,
                email_rule=self.email_rule,
            )
        except DomainError as exc:
            log.warning("account_open_rejected", error_code=exc.code, error=str(exc))
            raise

        log.info("account_opened", balance=str(account.balance), withdraw_policy=self.withdraw_policy.value)
        return account

    def deposit(self, account: Account, amount: Decimal | int | float) -> Decimal:
        log = logger.bind(email=account.email, amount=str(amount))

        try:
            account.deposit(amount)
        except DomainError as exc:
            log.warning("deposit_rejected", error_code=exc.code, error=str(exc))
            raise

        log.info("deposit_completed", balance_after=str(account.balance))
        return account.balance

    def withdraw(self, account: Account, amount: Decimal | int | float) -> Decimal:
        log = logger.bind(email=account.email, amount=str(amount))
        balance_before = account.balance

        try:
            account.withdraw(amount)
        except DomainError as exc:
            log.warning(
                "withdraw_rejected",
                error_code=exc.code,
                error=str(exc),
                available=str(balance_before),
            )
            raise

        log.info("withdraw_completed", balance_before=str(balance_before), balance_after=str(account.balance))
        return account.balance

    def transfer(self, source: Account, target: Account, amount: Decimal | int | float) -> None:
        log = logger.bind(source=source.email, target=target.email, amount=str(amount))

        try:
            source.transfer(target, amount)
        except DomainError as exc:
            log.warning(
                "transfer_rejected",
                error_code=exc.code,
                error=str(exc),
                available=str(source.balance),
            )
            raise

        log.info(
            "transfer_completed",
            source_balance_after=str(source.balance),
            target_balance_after=str(target.balance),
        )
