from contextlib import asynccontextmanager
from fastapi import FastAPI
import logging

from app.api.endpoints import payments as payments_api
from app.core.config import configure_stripe
from app.core.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    # Refuse to start without a Stripe key
    configure_stripe()
    logger.info("Stripe client configured; payment intent proxy ready.")
    yield


app = FastAPI(title="Payment Intent Proxy", version="0.1.0", lifespan=lifespan)

# Include API routers
app.include_router(payments_api.router, tags=["Payments"])


@app.get("/ping", tags=["Health Check"])
async def ping():
    return {"message": "pong"}
