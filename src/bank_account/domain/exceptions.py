from decimal import Decimal


class DomainError(Exception):
    """Base exception for domain errors."""

    code = "DOMAIN_ERROR"


class InvalidArgumentError(DomainError, ValueError):
    """Raised when an operation receives a malformed email or amount."""

    code = "INVALID_ARGUMENT"


class InvalidEmailError(InvalidArgumentError):
    """Raised when an account email fails validation."""

    def __init__(self, email: object) -> None:
        self.email = email
        super().__init__(f"Invalid email: {email!r}")


class InvalidAmountError(InvalidArgumentError):
    """Raised when a monetary amount is invalid."""

    def __init__(self, amount: object, reason: str) -> None:
        self.amount = amount
        self.reason = reason
        super().__init__(f"Invalid amount {amount}: {reason}")


class InsufficientFundsError(DomainError):
    """Raised when account has insufficient funds for a withdrawal or transfer."""

    code = "INSUFFICIENT_FUNDS"

    def __init__(self, email: str, required: Decimal, available: Decimal) -> None:
        self.email = email
        self.required = required
        self.available = available
        super().__init__(f"Account {email} has insufficient funds: required {required}, available {available}")
