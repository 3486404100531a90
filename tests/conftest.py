import sys
from dataclasses import dataclass
from pathlib import Path

import pytest

# Garante que src esteja no path (shared, verify_payment, payment_callback)
_root = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(_root / "src"))

from shared.config import GatewaySettings  # noqa: E402


@dataclass
class FakeLambdaContext:
    function_name: str = "test"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = "arn:aws:lambda:us-east-1:123456789012:function:test"
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"


@pytest.fixture
def lambda_context() -> FakeLambdaContext:
    """Contexto mínimo exigido por Logger.inject_lambda_context."""
    return FakeLambdaContext()


@pytest.fixture
def settings() -> GatewaySettings:
    return GatewaySettings(secret_key="test-secret", api_url="https://spaceremit.test/api/v2/payment_info/")


@pytest.fixture
def payment_data() -> dict:
    """Registro de pagamento no formato devolvido pela SpaceRemit."""
    return {
        "id": "SP-1001",
        "status": "Completed",
        "status_tag": "A",
        "total_amount": "49.90",
        "currency": "USD",
        "buyer_payed_amount": "51.40",
        "seller_received_amount": "47.10",
        "fees_amount": "2.80",
        "notes": "Order 42 - buyer: maria.silva@example.com",
        "date": "2026-03-14 10:22:05",
    }
