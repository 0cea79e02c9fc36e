from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from bank_account.domain.models import WithdrawPolicy
from bank_account.domain.validation import EmailPrefixRule


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "json"

    # Account rules
    withdraw_policy: WithdrawPolicy = WithdrawPolicy.STRICT
    email_prefix_rule: EmailPrefixRule = EmailPrefixRule.ALNUM


settings = Settings()
