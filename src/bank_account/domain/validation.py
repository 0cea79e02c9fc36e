"""Stateless validation rules for account emails and monetary amounts."""

import re
from decimal import ROUND_HALF_EVEN, Decimal, localcontext
from enum import Enum

from bank_account.domain.exceptions import InvalidAmountError


AMOUNT_TOLERANCE = Decimal("1e-7")
# amounts must stay below 10**28 units
MAX_INTEGER_DIGITS = 28

_PRECISION_MARGIN = 2
_DOMAIN_PATTERN = re.compile(r"[A-Za-z0-9.]+")


class EmailPrefixRule(Enum):
    """Characters allowed in the part of an email before the ``@``."""

    ALNUM = "alnum"
    ALNUM_DOT_UNDERSCORE = "alnum_dot_underscore"


_PREFIX_PATTERNS = {
    EmailPrefixRule.ALNUM: re.compile(r"[A-Za-z0-9]+"),
    EmailPrefixRule.ALNUM_DOT_UNDERSCORE: re.compile(r"[A-Za-z0-9._]+"),
}


def is_email_valid(email: object, rule: EmailPrefixRule = EmailPrefixRule.ALNUM) -> bool:
    if not isinstance(email, str) or not email:
        return False
    if any(ch.isspace() for ch in email):
        return False
    if email.count("@") != 1:
        return False

    prefix, domain = email.split("@")

    if not prefix or not domain:
        return False
    if prefix.startswith(".") or domain.endswith("."):
        return False
    if ".." in email:
        return False
    if "." not in domain:
        return False
    if not _PREFIX_PATTERNS[rule].fullmatch(prefix):
        return False

    return _DOMAIN_PATTERN.fullmatch(domain) is not None


def _as_decimal(amount: object) -> Decimal | None:
    # bool is an int subclass but never a monetary amount
    if isinstance(amount, bool):
        return None
    if isinstance(amount, int):
        return Decimal(amount)
    if isinstance(amount, float):
        # repr gives the shortest string that round-trips, e.g. 0.3 not 0.2999...
        value = Decimal(repr(amount))
    elif isinstance(amount, Decimal):
        value = amount
    else:
        return None
    return value if value.is_finite() else None


def _scaled_cents(value: Decimal) -> tuple[Decimal, int]:
    """Return the distance of ``value * 100`` from its nearest whole cent, and that cent count."""
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(value.as_tuple().digits) + _PRECISION_MARGIN)
        scaled = value.scaleb(2)
        cents = int(scaled.to_integral_value(rounding=ROUND_HALF_EVEN))
        offset = abs(scaled - cents)
    return offset, cents


def _is_too_large(value: Decimal) -> bool:
    return value.adjusted() >= MAX_INTEGER_DIGITS


def is_amount_valid(amount: object, tolerance: Decimal = AMOUNT_TOLERANCE) -> bool:
    """Return True if ``amount`` is positive and has at most two decimal places.

    The amount is scaled by 100 and accepted when it lies within ``tolerance``
    of a whole, non-zero number of cents.
    """
    value = _as_decimal(amount)
    if value is None or value <= 0 or _is_too_large(value):
        return False

    offset, cents = _scaled_cents(value)
    return cents > 0 and offset <= tolerance


def to_cents(amount: object) -> int:
    """Convert a valid amount to integer cents.

    Raises:
        InvalidAmountError: If the amount is not positive, too large, or has more than two decimal places.
    """
    value = _as_decimal(amount)
    if value is None:
        raise InvalidAmountError(amount, "Amount must be a finite number")
    if value <= 0:
        raise InvalidAmountError(amount, "Amount must be positive")
    if _is_too_large(value):
        raise InvalidAmountError(amount, f"Amount must be below 10**{MAX_INTEGER_DIGITS}")
    if not is_amount_valid(value):
        raise InvalidAmountError(amount, "Amount must have at most two decimal places")

    return _scaled_cents(value)[1]
