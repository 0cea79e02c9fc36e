"""In-memory bank account with validated emails and two-decimal amounts."""

from bank_account.domain import (
    Account,
    DomainError,
    EmailPrefixRule,
    InsufficientFundsError,
    InvalidAmountError,
    InvalidArgumentError,
    InvalidEmailError,
    WithdrawPolicy,
    is_amount_valid,
    is_email_valid,
)


__all__ = [
    "Account",
    "DomainError",
    "EmailPrefixRule",
    "InsufficientFundsError",
    "InvalidAmountError",
    "InvalidArgumentError",
    "InvalidEmailError",
    "WithdrawPolicy",
    "is_amount_valid",
    "is_email_valid",
]
