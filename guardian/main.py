# guardian/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from guardian.config import settings
from guardian.routers import alerts, devices, policy, reports, telemetry
from guardian.services.errors import (
    GuardianError, InvalidWindow, DeviceNotFound, UserNotFound, AlertNotFound,
    WebFilterNotFound, DuplicateDevice, DuplicateUser, DuplicateRelationship,
    RoleMismatch, StoreUnavailable,
)

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Family Guard API",
    version="0.1.0"
)

app.include_router(devices.router, prefix="/api", tags=["devices"])
app.include_router(telemetry.router, prefix="/api/telemetry", tags=["telemetry"])
app.include_router(policy.router, prefix="/api/policy", tags=["policy"])
app.include_router(alerts.router, prefix="/api/alerts", tags=["alerts"])
app.include_router(reports.router, prefix="/api/reports", tags=["reports"])

# Domain error -> HTTP status
ERROR_STATUS = {
    InvalidWindow: 400,
    DeviceNotFound: 404,
    UserNotFound: 404,
    AlertNotFound: 404,
    WebFilterNotFound: 404,
    DuplicateDevice: 409,
    DuplicateUser: 409,
    DuplicateRelationship: 409,
    RoleMismatch: 422,
    StoreUnavailable: 503,
}


@app.exception_handler(GuardianError)
async def handle_domain_error(request: Request, exc: GuardianError):
    status = next((code for cls, code in ERROR_STATUS.items() if isinstance(exc, cls)), 500)
    if status >= 500:
        logger.error(f"REQUEST failed path={request.url.path} status={status} err={exc}")
    return JSONResponse(status_code=status, content={"detail": str(exc)})


@app.get("/health")
def health():
    return {"status": "ok"}
