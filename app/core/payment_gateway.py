import stripe # Stripe library
from typing import Any, List
import logging

logger = logging.getLogger(__name__)

# Only card payments are offered to clients
PAYMENT_METHOD_TYPES: List[str] = ["card"]


class StripePaymentGateway:
    """
    Thin wrapper around the Stripe PaymentIntent API.

    amount and currency are forwarded exactly as received; Stripe does the
    validation. Values that are None are left out of the request by the SDK,
    so a missing field reaches Stripe as a missing parameter.
    """

    def create_payment_intent(self, amount: Any, currency: Any) -> Any:
        payment_intent_params = {
            'amount': amount,
            'currency': currency,
            'payment_method_types': list(PAYMENT_METHOD_TYPES),
        }
        # No idempotency key: every call creates a new intent
        payment_intent = stripe.PaymentIntent.create(**payment_intent_params)
        logger.info(f"PaymentIntent {payment_intent.id} created (amount={amount}, currency={currency})")
        return payment_intent


def error_message(exc: Exception) -> str:
    """Message text for a failed Stripe call, without the 'Request req_...:' prefix."""
    if isinstance(exc, stripe.StripeError):
        # str() on a StripeError carries the request id
        return exc.user_message or "<empty message>"
    return str(exc)
