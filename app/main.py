import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from app.api.admin import router as admin_router
from app.api.customers import router as customers_router
from app.api.invoices import router as invoices_router
from app.errors import ForbiddenInProduction

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Invoice Admin API",
    version="0.1.0",
)


@app.exception_handler(ForbiddenInProduction)
def forbidden_in_production(request: Request, exc: ForbiddenInProduction):
    logger.warning("Refused %s %s: %s", request.method, request.url.path, exc)
    return PlainTextResponse("Forbidden", status_code=403)


@app.get("/health")
def health_check():
    return {"status": "ok"}

app.include_router(admin_router)
app.include_router(customers_router)
app.include_router(invoices_router)
