import pytest
from fastapi.testclient import TestClient
from types import SimpleNamespace
import itertools
import os

# Add project root to sys.path to allow imports from app
import sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

# Must be set before app.core.config is imported; never a real key
os.environ["STRIPE_SECRET_KEY"] = "sk_test_payment_intent_proxy"

from app.main import app
from app.core.dependencies import get_payment_gateway


class FakePaymentGateway:
    """Stands in for StripePaymentGateway; records every call it receives."""

    def __init__(self, error: Exception = None):
        self.error = error
        self.calls = []
        self._counter = itertools.count(1)

    def create_payment_intent(self, amount, currency):
        self.calls.append({"amount": amount, "currency": currency})
        if self.error is not None:
            raise self.error
        n = next(self._counter)
        intent_id = f"pi_test{n:04d}"
        return SimpleNamespace(id=intent_id, client_secret=f"{intent_id}_secret_fake{n:04d}")


@pytest.fixture(scope="function")
def fake_gateway():
    gateway = FakePaymentGateway()
    app.dependency_overrides[get_payment_gateway] = lambda: gateway
    yield gateway
    app.dependency_overrides.pop(get_payment_gateway, None)


@pytest.fixture(scope="function")
def failing_gateway_factory():
    """Returns a function that installs a gateway raising the given exception."""
    def _install(error: Exception) -> FakePaymentGateway:
        gateway = FakePaymentGateway(error=error)
        app.dependency_overrides[get_payment_gateway] = lambda: gateway
        return gateway
    yield _install
    app.dependency_overrides.pop(get_payment_gateway, None)


@pytest.fixture(scope="function")
def client():
    with TestClient(app) as c:
        yield c
