"""
Notification hook for accepted payments.

Only logs for now. Dispatch is isolated: a failing notifier never changes the
verdict already computed for the request.
"""

import re
from typing import Callable

from aws_lambda_powertools import Logger

from shared.payment_status import Verdict
from shared.spaceremit import PaymentRecord

logger = Logger(service="notifier")

EMAIL_PATTERN = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")


def extract_email_from_notes(notes) -> str | None:
    if not notes or not isinstance(notes, str):
        return None
    match = EMAIL_PATTERN.search(notes)
    return match.group(0) if match else None


def notify_payment_accepted(record: PaymentRecord, verdict: Verdict) -> None:
    logger.info(
        "Pagamento aceito",
        extra={
            "payment_id": record.id,
            "amount": record.total_amount,
            "currency": record.currency,
            "buyer_email": extract_email_from_notes(record.notes),
            "status": record.status,
            "status_tag": record.status_tag,
            "description": verdict.description,
            "buyer_amount": record.buyer_payed_amount,
            "seller_amount": record.seller_received_amount,
            "date": record.date,
        },
    )


def dispatch_payment_accepted(
    record: PaymentRecord,
    verdict: Verdict,
    notify: Callable[[PaymentRecord, Verdict], None] = notify_payment_accepted,
) -> bool:
    """
    Run the notifier for an accepted payment.

    Returns:
        True if the notifier finished, False if it raised (error is logged).
    """
    try:
        notify(record, verdict)
        return True
    except Exception:
        logger.exception("Falha ao notificar pagamento aceito", extra={"payment_id": record.id})
        return False
