"""Domain layer - account entity and validation rules."""

from bank_account.domain.exceptions import (
    DomainError,
    InsufficientFundsError,
    InvalidAmountError,
    InvalidArgumentError,
    InvalidEmailError,
)
from bank_account.domain.models import Account, Money, WithdrawPolicy
from bank_account.domain.validation import (
    AMOUNT_TOLERANCE,
    EmailPrefixRule,
    is_amount_valid,
    is_email_valid,
    to_cents,
)


__all__ = [
    "AMOUNT_TOLERANCE",
    "Account",
    "DomainError",
    "EmailPrefixRule",
    "InsufficientFundsError",
    "InvalidAmountError",
    "InvalidArgumentError",
    "InvalidEmailError",
    "Money",
    "WithdrawPolicy",
    "is_amount_valid",
    "is_email_valid",
    "to_cents",
]
