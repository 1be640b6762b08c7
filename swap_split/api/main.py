"""
FastAPI Backend
API اشتراک تقسیم سواپ
"""

import logging
from datetime import datetime

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from swap_split.api.rate_limit import limiter
from swap_split.api.subscriptions import router as subscriptions_router
from swap_split.core.config import get_settings
from swap_split.database.connection import init_db

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Swap Split Subscription API", version="1.0.0")

# Rate Limiting
app.state.limiter = limiter
app.add_middleware(SlowAPIMiddleware)


@app.exception_handler(RateLimitExceeded)
async def rate_limit_handler(request, exc):
    return JSONResponse(
        {"detail": "Rate limit exceeded. Please try again later."},
        status_code=429
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request, exc):
    """بدنه نامعتبر هم خطای 400 است، نه 422"""
    return JSONResponse(
        {
            "detail": {
                "reason": "MalformedRequest",
                "message": "Request body or query is malformed",
                "errors": [
                    {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
                    for err in exc.errors()
                ],
            }
        },
        status_code=400,
    )


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(subscriptions_router)


@app.on_event("startup")
async def startup():
    """ساخت جداول فقط در حالت توسعه - در production از alembic استفاده کنید"""
    if settings.auto_create_tables:
        await init_db()
    logger.info("Swap Split API started")


# === Health & Info ===

@app.get("/")
async def root():
    return {"status": "ok", "message": "Swap Split Subscription API v1"}


@app.get("/health")
async def health():
    return {"status": "healthy", "timestamp": datetime.utcnow().isoformat()}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
