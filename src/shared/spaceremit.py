"""
SpaceRemit API client: payment_info lookup.

The gateway answers with ``{"response_status": "success", "data": {...}}``
where ``data`` is the payment record, or with a non-success
``response_status`` and a ``message``.
"""

import json
import ssl
import urllib.error
import urllib.request
from typing import Any, Union

from aws_lambda_powertools import Logger
from pydantic import BaseModel, ConfigDict, field_validator

from shared.config import GatewaySettings

logger = Logger(service="spaceremit")

SUCCESS_STATUS = "success"


class SpaceRemitAPIError(Exception):
    """Base error for payment_info lookups."""

    pass


class GatewayUnavailableError(SpaceRemitAPIError):
    """The gateway could not be reached or answered with something that is not JSON."""

    pass


class PaymentVerificationError(SpaceRemitAPIError):
    """The gateway answered, but did not confirm the payment."""

    pass


class PaymentRecord(BaseModel):
    """
    Payment as reported by SpaceRemit.

    Only id and status_tag are validated; amounts, dates, notes and unknown
    keys (fee breakdown, etc.) are kept exactly as the gateway sent them.
    """

    model_config = ConfigDict(extra="allow")

    id: str
    status: Any = None
    status_tag: str = ""
    total_amount: Any = None
    currency: Any = None
    buyer_payed_amount: Any = None
    seller_received_amount: Any = None
    notes: Any = None
    date: Any = None

    @field_validator("id", mode="before")
    @classmethod
    def normalize_id(cls, v: Union[str, int]) -> str:
        value = str(v).strip() if v is not None else ""
        if not value:
            raise ValueError("id do pagamento obrigatório")
        return value

    @field_validator("status_tag", mode="before")
    @classmethod
    def tag_as_str(cls, v: Any) -> str:
        return "" if v is None else str(v)


def _api_request(body: dict, settings: GatewaySettings) -> dict:
    """
    POST a JSON body to the payment_info endpoint.

    Returns:
        Parsed JSON response as dict.

    Raises:
        GatewayUnavailableError: On connection/timeout or invalid JSON.
        PaymentVerificationError: On a non-2xx HTTP status.
    """
    data = json.dumps(body).encode("utf-8")
    req = urllib.request.Request(
        settings.api_url,
        data=data,
        method="POST",
        headers={
            "Content-Type": "application/json",
            "Accept": "application/json",
        },
    )

    try:
        with urllib.request.urlopen(
            req, timeout=settings.request_timeout_sec, context=ssl.create_default_context()
        ) as resp:
            raw = resp.read().decode("utf-8", errors="replace")
            if not 200 <= resp.status < 300:
                logger.warning("SpaceRemit API status %s: %s", resp.status, raw[:500])
                raise PaymentVerificationError(f"API retornou status {resp.status}")
    except urllib.error.HTTPError as e:
        raw = e.read().decode("utf-8", errors="replace") if e.fp else ""
        logger.warning("SpaceRemit HTTP error %s: %s", e.code, raw[:500])
        raise PaymentVerificationError(f"API retornou erro HTTP {e.code}") from e
    except urllib.error.URLError as e:
        reason = getattr(e, "reason", None)
        if isinstance(reason, TimeoutError) or (reason and "timed out" in str(reason).lower()):
            raise GatewayUnavailableError("Timeout ao conectar na API SpaceRemit") from e
        raise GatewayUnavailableError("Falha de conexão com a API SpaceRemit") from e
    except TimeoutError as e:
        raise GatewayUnavailableError("Timeout ao conectar na API SpaceRemit") from e
    except OSError as e:
        raise GatewayUnavailableError("Falha de conexão com a API SpaceRemit") from e

    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.warning("Resposta da API não é JSON válido: %s", raw[:300])
        raise GatewayUnavailableError("Resposta inválida da API SpaceRemit") from e
    if not isinstance(parsed, dict):
        raise GatewayUnavailableError("Resposta inválida da API SpaceRemit")
    return parsed


def get_payment_info(payment_id: str, settings: GatewaySettings) -> PaymentRecord:
    """
    Look up a payment on SpaceRemit.

    Args:
        payment_id: Gateway payment identifier.
        settings: Resolved gateway settings (secret key, URL, timeout).

    Returns:
        The payment record reported by the gateway.

    Raises:
        GatewayUnavailableError: Gateway unreachable or response not JSON.
        PaymentVerificationError: Gateway did not confirm the payment.
    """
    logger.info("Consultando pagamento na SpaceRemit", extra={"payment_id": payment_id})
    result = _api_request(
        {"private_key": settings.secret_key, "payment_id": payment_id},
        settings,
    )

    if result.get("response_status") != SUCCESS_STATUS:
        message = result.get("message") or "Payment verification failed"
        logger.warning(
            "SpaceRemit recusou a consulta",
            extra={"payment_id": payment_id, "response_status": result.get("response_status")},
        )
        raise PaymentVerificationError(str(message))

    data = result.get("data")
    if not isinstance(data, dict):
        raise PaymentVerificationError("Resposta da SpaceRemit sem dados do pagamento")
    try:
        return PaymentRecord.model_validate(data)
    except ValueError as e:
        raise PaymentVerificationError(f"Dados do pagamento inválidos: {e}") from e
