"""
Shared fixtures for gateway tests.

Provides:
- A sandbox GatewayConfig with known credentials
- A fake ACH service behind httpx.MockTransport that records requests
- A gateway wired to the fake service
"""

from typing import Dict, List
from urllib.parse import parse_qsl

import httpx
import pytest

from green_ach import ACHGateway, GatewayConfig, TransactionRequest


CLIENT_ID = "123456"
API_PASSWORD = "s3cr3tpass"


# =============================================================================
# Fake ACH Service
# =============================================================================

class FakeACHService:
    """Answers every POST with a canned body and remembers the requests."""

    def __init__(
        self,
        body: str = "0,Approved,98765",
        status_code: int = 200,
        exc: Exception | None = None,
    ):
        self.body = body
        self.status_code = status_code
        self.exc = exc
        self.requests: List[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        return httpx.Response(self.status_code, text=self.body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_fields(self) -> Dict[str, str]:
        """Form fields of the most recent request."""
        body = self.last_request.read().decode()
        return dict(parse_qsl(body, keep_blank_values=True))


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def config() -> GatewayConfig:
    return GatewayConfig(client_id=CLIENT_ID, api_password=API_PASSWORD, live=False)


@pytest.fixture
def ach_service() -> FakeACHService:
    return FakeACHService()


@pytest.fixture
def gateway(config: GatewayConfig, ach_service: FakeACHService) -> ACHGateway:
    return ACHGateway(config, transport=ach_service.transport)


@pytest.fixture
def transaction() -> TransactionRequest:
    return TransactionRequest(
        name_first="Testing",
        name_middle_initial="Q",
        name_last="Smith",
        email="test@test.test",
        phone="323-232-3232",
        dob="01/02/1980",
        last4_ssn="1234",
        address="123 Testing Lane",
        city="Testville",
        state="GA",
        zip="12345-1234",
        country="US",
        routing="000000000",
        account="12345601",
        account_type="PC",
        bank_name="Test Bank",
        bank_city="Bankville",
        bank_state="NY",
        bank_phone="555-555-5555",
        product="Internal description of transaction",
        descriptor="For Services Rendered",
        currency="USD",
        amount="123.45",
        date="07/19/2018",
    )
