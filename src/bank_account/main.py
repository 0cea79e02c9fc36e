import structlog

from bank_account.application.services import AccountService
from bank_account.config import Settings, settings
from bank_account.logging import configure_logging


logger = structlog.get_logger()


def create_account_service(app_settings: Settings = settings) -> AccountService:
    """Configure logging and build an AccountService from settings."""
    configure_logging(
        level=app_settings.log_level,
        log_format=app_settings.log_format,
    )

    service = AccountService.from_settings(app_settings)

    logger.info(
        "account_service_configured",
        log_level=app_settings.log_level,
        withdraw_policy=service.withdraw_policy.value,
        email_prefix_rule=service.email_rule.value,
    )
    return service
