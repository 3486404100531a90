"""
Gateway settings resolved from the Lambda environment.

Expects env: SPACEREMIT_SECRET_KEY; optional SPACEREMIT_API_URL,
SPACEREMIT_ACCEPT_TEST_PAYMENTS, SPACEREMIT_TIMEOUT_SEC.
"""

import os

from pydantic import BaseModel, Field, ValidationError

DEFAULT_API_URL = "https://spaceremit.com/api/v2/payment_info/"
DEFAULT_TIMEOUT_SEC = 15

ENV_FIELDS = {
    "secret_key": "SPACEREMIT_SECRET_KEY",
    "api_url": "SPACEREMIT_API_URL",
    "accept_test_payments": "SPACEREMIT_ACCEPT_TEST_PAYMENTS",
    "request_timeout_sec": "SPACEREMIT_TIMEOUT_SEC",
}


class ConfigurationError(Exception):
    """Raised when the gateway settings are missing or invalid."""

    pass


class GatewaySettings(BaseModel):
    secret_key: str = Field(..., min_length=1, repr=False, description="Chave privada SpaceRemit")
    api_url: str = Field(default=DEFAULT_API_URL, min_length=1)
    accept_test_payments: bool = Field(
        default=False,
        description="Aceita pagamentos de teste (status T). Apenas sandbox.",
    )
    request_timeout_sec: float = Field(default=DEFAULT_TIMEOUT_SEC, gt=0)

    @classmethod
    def from_env(cls) -> "GatewaySettings":
        values = {}
        for field, key in ENV_FIELDS.items():
            value = (os.environ.get(key) or "").strip()
            if value:
                values[field] = value
        if "secret_key" not in values:
            raise ConfigurationError(f"Variável de ambiente obrigatória não definida: {ENV_FIELDS['secret_key']}")
        try:
            return cls(**values)
        except ValidationError as e:
            invalid = ", ".join(ENV_FIELDS[str(err["loc"][0])] for err in e.errors())
            raise ConfigurationError(f"Configuração inválida: {invalid}") from e


_settings: GatewaySettings | None = None


def get_settings() -> GatewaySettings:
    global _settings
    if _settings is None:
        _settings = GatewaySettings.from_env()
    return _settings


def load_settings_at_cold_start(logger) -> GatewaySettings | None:
    """
    Resolve settings when the handler module is imported.

    A missing or invalid configuration is logged here, at cold start; the
    handler still answers 500 on each invocation through get_settings().
    """
    try:
        return get_settings()
    except ConfigurationError as e:
        logger.error("Configuração do gateway inválida no cold start: %s", e)
        return None
