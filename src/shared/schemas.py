"""DTOs and validation for the verify-payment and callback handlers."""

from typing import Union
from pydantic import BaseModel, Field, field_validator

from shared.spaceremit import PaymentRecord


class VerifyPaymentInput(BaseModel):
    """Body of POST /verify-payment."""

    payment_id: str = Field(..., min_length=1, description="ID do pagamento SpaceRemit")

    @field_validator("payment_id", mode="before")
    @classmethod
    def coerce_payment_id(cls, v: Union[str, int]) -> str:
        if v is None:
            raise ValueError("payment_id obrigatório")
        return str(v).strip()


class CallbackPayload(BaseModel):
    """Push notification sent by SpaceRemit to the callback URL."""

    data: PaymentRecord
