# app/api/endpoints/payments.py
import stripe # Stripe library
from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from typing import Optional

from app.core import config
from app.core.dependencies import get_payment_gateway
from app.core.payment_gateway import StripePaymentGateway, error_message
from app.schemas.payment import PaymentIntentCreateRequest, PaymentIntentCreateResponse, PaymentIntentError
import logging

logger = logging.getLogger(__name__)
router = APIRouter()


def _failure_response(message: str) -> JSONResponse:
    if not config.EXPOSE_PAYMENT_ERRORS:
        message = config.GENERIC_PAYMENT_ERROR_MESSAGE
    return JSONResponse(status_code=500, content=PaymentIntentError(error=message).model_dump())


# Routed for every method; clients are expected to POST
@router.api_route(
    "/createPaymentIntent",
    methods=["POST", "GET", "PUT", "PATCH", "DELETE"],
    response_model=PaymentIntentCreateResponse,
    responses={500: {"model": PaymentIntentError}},
)
async def create_payment_intent_endpoint(
    payload: Optional[PaymentIntentCreateRequest] = None,
    gateway: StripePaymentGateway = Depends(get_payment_gateway),
):
    if payload is None:
        payload = PaymentIntentCreateRequest()
    amount, currency = payload.amount, payload.currency
    logger.info(f"Creating payment intent: amount={amount}, currency={currency}")

    try:
        payment_intent = await run_in_threadpool(gateway.create_payment_intent, amount, currency)
    except stripe.StripeError as e:
        message = error_message(e)
        logger.error(f"Stripe API error creating payment intent (amount={amount}, currency={currency}): {message}")
        return _failure_response(message)
    except Exception as e:
        logger.error(f"Generic error creating payment intent (amount={amount}, currency={currency}): {e}", exc_info=True)
        return _failure_response(error_message(e))

    return PaymentIntentCreateResponse(clientSecret=payment_intent.client_secret)
