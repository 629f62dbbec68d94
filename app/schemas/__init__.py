from .payment import (
    PaymentIntentCreateRequest,
    PaymentIntentCreateResponse,
    PaymentIntentError
)
