"""
Handler for SpaceRemit payment callbacks (webhook).

POST body: { "data": { "id": "SP-123", "status": "Completed", "status_tag": "A", ... } }

Structurally valid callbacks are always acknowledged with 200, whatever the
payment status, so the gateway does not keep retrying them.
"""

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.parser import parse
from aws_lambda_powertools.utilities.typing import LambdaContext

from shared.config import ConfigurationError, load_settings_at_cold_start
from shared.responses import body_json, get_method, http_response
from shared.schemas import CallbackPayload
from shared.spaceremit import GatewayUnavailableError, PaymentVerificationError
from shared.verification import PaymentVerificationService

logger = Logger(service="payment-callback")
load_settings_at_cold_start(logger)


@logger.inject_lambda_context
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    method = get_method(event)

    if method == "OPTIONS":
        return http_response(200, {})

    if method != "POST":
        return http_response(405, {"error": "Method not allowed"})

    body = body_json(event)
    try:
        payload = parse(event=body, model=CallbackPayload)
    except ValueError as e:
        logger.warning("Payload de callback inválido: %s", e)
        return http_response(400, {"error": "Invalid payload structure"})

    try:
        service = PaymentVerificationService()
        result = service.process_callback(payload.data)
        return http_response(200, result)

    except PaymentVerificationError as e:
        logger.warning("Verificação do callback falhou", extra={"payment_id": payload.data.id, "reason": str(e)})
        return http_response(400, {"error": "Payment verification failed", "details": str(e)})
    except GatewayUnavailableError as e:
        logger.warning("API SpaceRemit: %s", e)
        return http_response(502, {"error": "Payment gateway unavailable", "details": str(e)})
    except ConfigurationError as e:
        logger.error("Configuração: %s", e)
        return http_response(500, {"error": "Internal server error"})
    except Exception:
        logger.exception("Erro ao processar callback")
        return http_response(500, {"error": "Internal server error"})
