import os
import stripe # Import stripe
from dotenv import load_dotenv
from typing import Optional

load_dotenv()


class PaymentConfigurationError(RuntimeError):
    """Raised when the payment processor cannot be configured from the environment."""


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# Stripe API Keys - no default, must come from the environment (or .env)
STRIPE_SECRET_KEY: Optional[str] = os.getenv("STRIPE_SECRET_KEY")

# When False, callers get a fixed message instead of the raw Stripe error text
EXPOSE_PAYMENT_ERRORS: bool = _env_flag("EXPOSE_PAYMENT_ERRORS", True)
GENERIC_PAYMENT_ERROR_MESSAGE: str = "Payment gateway error."

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


def configure_stripe(secret_key: Optional[str] = None) -> None:
    """
    Point the Stripe SDK at the configured secret key.

    Called once at application startup. Raises PaymentConfigurationError
    when no key is available so the service refuses to start instead of
    failing on the first request.
    """
    key = secret_key if secret_key is not None else STRIPE_SECRET_KEY
    if not key or not key.strip():
        raise PaymentConfigurationError("STRIPE_SECRET_KEY is not set.")

    stripe.api_key = key.strip()
    # One attempt per request; the SDK retries twice by default
    stripe.max_network_retries = 0
