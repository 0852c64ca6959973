from datetime import datetime, timezone
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from structlog import get_logger
from buyer_registry.config import settings
from buyer_registry.errors import ApiError, NotFound, ValidationError
from buyer_registry.logging_config import configure_logging
from buyer_registry.middleware.body_limit import BodySizeLimitMiddleware
from buyer_registry.routers import market_trends, shared_homes, shares, wishlists
from buyer_registry.services.shares import ShareStore

configure_logging()
logger = get_logger()

app = FastAPI(title="Buyer Registry API")
# last added runs outermost, so CORS headers also reach 413 responses
app.add_middleware(BodySizeLimitMiddleware, max_bytes=settings.MAX_BODY_BYTES)
app.add_middleware(CORSMiddleware, allow_origins=settings.CORS_ORIGINS, allow_credentials=True, allow_methods=["*"], allow_headers=["*"])

# One store per process; handlers reach it through dependencies.get_share_store
app.state.share_store = ShareStore()

scheduler = AsyncIOScheduler()

async def reap_expired_shares():
    removed = app.state.share_store.purge_expired()
    logger.info("Share reaper run", removed=removed)

@app.on_event("startup")
async def startup_event():
    if settings.SHARE_REAPER_INTERVAL_MINUTES > 0:
        scheduler.add_job(reap_expired_shares, "interval", minutes=settings.SHARE_REAPER_INTERVAL_MINUTES)
        scheduler.start()
        logger.info("Share reaper scheduled", interval_minutes=settings.SHARE_REAPER_INTERVAL_MINUTES)

@app.on_event("shutdown")
async def shutdown_event():
    if scheduler.running:
        scheduler.shutdown()

@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    problems = [
        ".".join(str(part) for part in error.get("loc", ()) if part != "body") or "body"
        for error in exc.errors()
    ]
    logger.info("Request validation failed", path=request.url.path, fields=problems)
    error = ValidationError(f"Invalid or missing field(s): {', '.join(problems)}", fields=problems)
    return JSONResponse(status_code=error.status_code, content=error.to_payload())

@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        error = NotFound("Route not found.")
        return JSONResponse(status_code=404, content=error.to_payload())
    return JSONResponse(status_code=exc.status_code, content={"error": "HTTPError", "detail": exc.detail})

@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error", path=request.url.path, error=str(exc))
    error = ApiError("Internal server error")
    return JSONResponse(status_code=error.status_code, content=error.to_payload())

app.include_router(market_trends.router)
app.include_router(shares.router)
app.include_router(shared_homes.router)
app.include_router(wishlists.router)

@app.get("/healthz")
async def healthz():
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}
