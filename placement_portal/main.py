import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy import text

from placement_portal.config import settings
from placement_portal.core.errors import PortalError, ValidationError
from placement_portal.core.rate_limiter import auth_rate_limiter
from placement_portal.database import init_db, engine
from placement_portal.logging_config import setup_logging
from placement_portal.routers import auth, colleges, recruiter, student
from placement_portal.services.resume_storage import PUBLIC_PREFIX

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Campus Placement Portal API",
    description="Students, colleges and recruiters: job postings, approvals and applications.",
    version="1.0.0",
)

cors_origins = [o.strip() for o in settings.cors_allow_origins.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router, prefix=settings.api_prefix)
app.include_router(colleges.router, prefix=settings.api_prefix)
app.include_router(student.router, prefix=settings.api_prefix)
app.include_router(recruiter.router, prefix=settings.api_prefix)

app.mount(PUBLIC_PREFIX, StaticFiles(directory=settings.upload_dir, check_dir=False), name="uploads")

RATE_LIMITED_PATHS = {
    f"{settings.api_prefix}/auth/login",
    f"{settings.api_prefix}/auth/register",
}


@app.exception_handler(PortalError)
async def portal_error_handler(request, exc: PortalError):
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=headers)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request, exc: RequestValidationError):
    errors = []
    for err in exc.errors():
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path")]
        message = str(err.get("msg", "Invalid value")).removeprefix("Value error, ")
        errors.append({"field": ".".join(loc) or "body", "message": message})
    body = ValidationError(errors=errors, detail=errors[0]["message"] if errors else None)
    return JSONResponse(status_code=body.status_code, content=body.to_dict())


@app.exception_handler(Exception)
async def unhandled_exception_handler(request, exc):
    logger.exception("Unhandled server error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error", "code": "upstream_failure"})


@app.middleware("http")
async def apply_rate_limits(request, call_next):
    limit = settings.rate_limit_auth_per_min
    guarded = request.method != "OPTIONS" and request.url.path in RATE_LIMITED_PATHS
    if not guarded or limit <= 0:
        return await call_next(request)

    caller = request.client.host if request.client else "unknown"
    allowed, retry_after = auth_rate_limiter.allow(f"{caller}:{request.url.path}", limit=limit, window_seconds=60)
    if allowed:
        return await call_next(request)
    logger.warning("Rate limit hit for %s on %s", caller, request.url.path)
    return JSONResponse(
        status_code=429,
        content={"detail": "Too many attempts. Wait a minute and try again.", "code": "rate_limited"},
        headers={"Retry-After": str(retry_after)},
    )


@app.get("/health/live")
def health_live():
    return {"status": "ok"}


@app.get("/health/ready")
def health_ready():
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return {"status": "ready"}
    except Exception:
        logger.exception("Readiness check failed")
        return JSONResponse(status_code=503, content={"status": "not_ready"})


PLACEHOLDER_SECRET_KEY = "replace-with-a-long-random-secret-key"
PLACEHOLDER_DB_CREDENTIALS = "username:password@"


def _placeholder_settings() -> list[str]:
    """Names of deployment settings still carrying the shipped example values."""
    found = []
    if settings.secret_key == PLACEHOLDER_SECRET_KEY:
        found.append("SECRET_KEY")
    if PLACEHOLDER_DB_CREDENTIALS in settings.database_url:
        found.append("DATABASE_URL")
    return found


@app.on_event("startup")
def on_startup():
    env = (settings.app_env or "development").lower()
    logger.info("Starting Campus Placement Portal API (env=%s)", env)
    placeholders = _placeholder_settings()
    if placeholders and env in {"production", "prod"}:
        raise RuntimeError(f"Refusing to start in production with placeholder {', '.join(placeholders)}")
    for name in placeholders:
        logger.warning("%s still uses its example value; set it in .env before deploying", name)
    init_db()


@app.get("/")
def root():
    return {"message": "Campus Placement Portal API. See /docs for the role-based endpoints."}
