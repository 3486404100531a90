"""
Handler for SpaceRemit payment verification.

POST body: { "payment_id": "SP-123" }
Response: { "payment_id": "...", "accepted": true, "description": "...", "status": "Completed", "status_tag": "A", ... }
"""

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.parser import parse
from aws_lambda_powertools.utilities.typing import LambdaContext

from shared.config import ConfigurationError, load_settings_at_cold_start
from shared.responses import body_json, get_method, http_response
from shared.schemas import VerifyPaymentInput
from shared.spaceremit import GatewayUnavailableError, PaymentVerificationError
from shared.verification import PaymentVerificationService

logger = Logger(service="verify-payment")
load_settings_at_cold_start(logger)


@logger.inject_lambda_context
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    method = get_method(event)

    if method == "OPTIONS":
        return http_response(200, {})

    if method != "POST":
        return http_response(405, {"error": "Método não permitido. Use POST."})

    try:
        payload: VerifyPaymentInput = parse(event=body_json(event), model=VerifyPaymentInput)

        service = PaymentVerificationService()
        result = service.verify(payload.payment_id)

        logger.info(
            "Verificação concluída",
            extra={"payment_id": payload.payment_id, "accepted": result.verdict.accepted},
        )
        return http_response(200, result.to_response())

    except ValueError as e:
        logger.warning("Validação: %s", e)
        return http_response(400, {"error": "Dados inválidos", "details": str(e)})
    except PaymentVerificationError as e:
        logger.warning("Pagamento não confirmado pela SpaceRemit: %s", e)
        return http_response(400, {"error": "Falha na verificação do pagamento", "details": str(e)})
    except GatewayUnavailableError as e:
        logger.warning("API SpaceRemit: %s", e)
        return http_response(502, {"error": "Gateway de pagamento indisponível", "details": str(e)})
    except ConfigurationError as e:
        logger.error("Configuração: %s", e)
        return http_response(500, {"error": "Gateway de pagamento não configurado"})
    except Exception:
        logger.exception("Erro crítico na verificação")
        return http_response(500, {"error": "Erro interno na verificação do pagamento"})
