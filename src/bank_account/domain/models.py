from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from bank_account.domain.exceptions import (
    InsufficientFundsError,
    InvalidAmountError,
    InvalidEmailError,
)
from bank_account.domain.validation import (
    EmailPrefixRule,
    is_email_valid,
    to_cents,
)


_CENT = Decimal("0.01")


class WithdrawPolicy(Enum):
    STRICT = "strict"
    ZERO_TOLERANT = "zero_tolerant"


@dataclass(frozen=True)
class Money:
    amount_cents: int

    def __post_init__(self) -> None:
        if self.amount_cents < 0:
            raise ValueError("Amount cannot be negative")

    @classmethod
    def from_amount(cls, amount: Decimal | int | float) -> "Money":
        return cls(to_cents(amount))

    @property
    def amount(self) -> Decimal:
        return Decimal(self.amount_cents) * _CENT


class Account:
    """In-memory account identified by email, holding a balance in whole cents."""

    def __init__(
        self,
        email: str,
        starting_balance: Decimal | int | float,
        *,
        withdraw_policy: WithdrawPolicy = WithdrawPolicy.STRICT,
        email_rule: EmailPrefixRule = EmailPrefixRule.ALNUM,
    ) -> None:
        if not is_email_valid(email, email_rule):
            raise InvalidEmailError(email)

        self._email = email
        self._balance = Money.from_amount(starting_balance)
        self.withdraw_policy = withdraw_policy

    def __repr__(self) -> str:
        return f"Account(email={self._email!r}, balance={self.balance})"

    @property
    def email(self) -> str:
        return self._email

    @property
    def balance(self) -> Decimal:
        return self._balance.amount

    @property
    def balance_cents(self) -> int:
        return self._balance.amount_cents

    def deposit(self, amount: Decimal | int | float) -> None:
        cents = to_cents(amount)
        self._balance = Money(self._balance.amount_cents + cents)

    def withdraw(self, amount: Decimal | int | float) -> None:
        if self.withdraw_policy is WithdrawPolicy.ZERO_TOLERANT and _is_zero(amount):
            return

        cents = to_cents(amount)
        self._ensure_available(amount, cents)
        self._balance = Money(self._balance.amount_cents - cents)

    def transfer(self, target: "Account", amount: Decimal | int | float) -> None:
        """Move ``amount`` from this account to ``target``.

        Both balances are computed before either is assigned, so a failed
        transfer leaves both accounts untouched. A transfer to the account
        itself is validated like any other and leaves the balance unchanged.
        """
        cents = to_cents(amount)
        self._ensure_available(amount, cents)
        if target is self:
            return

        new_source = Money(self._balance.amount_cents - cents)
        new_target = Money(target._balance.amount_cents + cents)

        self._balance = new_source
        target._balance = new_target

    def _ensure_available(self, amount: Decimal | int | float, cents: int) -> None:
        if cents <= self._balance.amount_cents:
            return

        if self.withdraw_policy is WithdrawPolicy.ZERO_TOLERANT:
            raise InvalidAmountError(amount, "Amount exceeds available balance")
        raise InsufficientFundsError(
            email=self._email,
            required=Decimal(cents) * _CENT,
            available=self.balance,
        )


def _is_zero(amount: object) -> bool:
    return not isinstance(amount, bool) and isinstance(amount, int | float | Decimal) and amount == 0
