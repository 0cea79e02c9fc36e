"""Shared pytest fixtures for bank account tests."""

import logging
from collections.abc import Generator

import pytest
import structlog

from bank_account.application.services import AccountService
from bank_account.domain.models import Account, WithdrawPolicy


@pytest.fixture
def account() -> Account:
    """Create account with a balance of 100."""
    return Account("test@test.com", 100)


@pytest.fixture
def source_account() -> Account:
    """Create transfer source account."""
    return Account("acc1@test.com", 150)


@pytest.fixture
def target_account() -> Account:
    """Create transfer target account."""
    return Account("acc2@test.com", 150)


@pytest.fixture
def zero_tolerant_account() -> Account:
    """Create account using the zero-tolerant withdraw policy."""
    return Account("test@test.com", 100, withdraw_policy=WithdrawPolicy.ZERO_TOLERANT)


@pytest.fixture
def service() -> AccountService:
    """Create AccountService with default rules."""
    return AccountService()


@pytest.fixture
def restore_logging() -> Generator[None, None, None]:
    """Restore root logger and structlog defaults after the test."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
    structlog.reset_defaults()
