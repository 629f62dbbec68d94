from app.core.payment_gateway import StripePaymentGateway

_gateway = StripePaymentGateway()


def get_payment_gateway() -> StripePaymentGateway:
    # Stateless; tests swap it out via app.dependency_overrides
    return _gateway
