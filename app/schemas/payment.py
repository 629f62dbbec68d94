# app/schemas/payment.py
from pydantic import BaseModel
from typing import Any, Optional

class PaymentIntentCreateRequest(BaseModel):
    # Deliberately untyped: values go to Stripe as received
    amount: Optional[Any] = None
    currency: Optional[Any] = None

class PaymentIntentCreateResponse(BaseModel):
    clientSecret: str

class PaymentIntentError(BaseModel):
    error: str
