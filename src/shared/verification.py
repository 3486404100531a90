from aws_lambda_powertools import Logger
from pydantic import BaseModel

from shared.config import GatewaySettings, get_settings
from shared.notifier import dispatch_payment_accepted
from shared.payment_status import Verdict, classify
from shared.spaceremit import PaymentRecord, get_payment_info

logger = Logger(service="verification")


class VerificationResult(BaseModel):
    payment: PaymentRecord
    verdict: Verdict

    def to_response(self) -> dict:
        return {
            "payment_id": self.payment.id,
            "accepted": self.verdict.accepted,
            "description": self.verdict.description,
            "status": self.payment.status,
            "status_tag": self.payment.status_tag,
            "total_amount": self.payment.total_amount,
            "currency": self.payment.currency,
            "date": self.payment.date,
        }


class PaymentVerificationService:
    def __init__(self, settings: GatewaySettings | None = None):
        self.settings = settings or get_settings()

    def classify_record(self, record: PaymentRecord) -> Verdict:
        return classify(record.status_tag, accept_test=self.settings.accept_test_payments)

    def verify(self, payment_id: str) -> VerificationResult:
        """
        Query the gateway for a payment and classify its status tag.

        Raises:
            GatewayUnavailableError: Gateway unreachable.
            PaymentVerificationError: Gateway did not confirm the payment.
        """
        record = get_payment_info(payment_id, self.settings)
        verdict = self.classify_record(record)
        logger.info(
            "Pagamento classificado",
            extra={
                "payment_id": record.id,
                "status_tag": record.status_tag,
                "accepted": verdict.accepted,
            },
        )
        return VerificationResult(payment=record, verdict=verdict)

    def process_callback(self, pushed: PaymentRecord) -> dict:
        """
        Handle a SpaceRemit push notification.

        The payment_info lookup only confirms the payment exists on the
        gateway; the verdict comes from the pushed record's status_tag.
        Accepted payments trigger the notifier.

        Returns:
            Acknowledgement body for the gateway.

        Raises:
            GatewayUnavailableError: Gateway unreachable.
            PaymentVerificationError: Gateway does not know the payment.
        """
        logger.info(
            "Callback SpaceRemit recebido",
            extra={
                "payment_id": pushed.id,
                "status": pushed.status,
                "status_tag": pushed.status_tag,
                "amount": pushed.total_amount,
                "currency": pushed.currency,
            },
        )
        get_payment_info(pushed.id, self.settings)
        verdict = self.classify_record(pushed)

        if verdict.accepted:
            dispatch_payment_accepted(pushed, verdict)
            message = "Payment processed successfully"
        else:
            logger.info(
                "Pagamento não aceito",
                extra={"payment_id": pushed.id, "status": pushed.status, "status_tag": pushed.status_tag},
            )
            message = f"Payment status: {pushed.status}"

        return {
            "success": verdict.accepted,
            "message": message,
            "payment_id": pushed.id,
            "status": pushed.status,
            "status_tag": pushed.status_tag,
            "description": verdict.description,
        }
