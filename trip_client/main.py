import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from trip_client.api.routers import admin, drafts, groups, guides, meta, reviews
from trip_client.core.config import settings
from trip_client.core.errors import APIError, RemoteAPIError, error_content
from trip_client.core.logging import setup_logging

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.project_name)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(drafts.router, prefix=settings.api_v1_prefix)
app.include_router(guides.router, prefix=settings.api_v1_prefix)
app.include_router(groups.router, prefix=settings.api_v1_prefix)
app.include_router(reviews.router, prefix=settings.api_v1_prefix)
app.include_router(admin.router, prefix=settings.api_v1_prefix)
app.include_router(meta.router, prefix=settings.api_v1_prefix)


@app.get("/health")
async def health():
    return {"status": "ok"}


STATUS_CODES = {
    status.HTTP_400_BAD_REQUEST: "VALIDATION_ERROR",
    status.HTTP_401_UNAUTHORIZED: "UNAUTHORIZED",
    status.HTTP_403_FORBIDDEN: "FORBIDDEN",
    status.HTTP_404_NOT_FOUND: "NOT_FOUND",
    status.HTTP_409_CONFLICT: "CONFLICT",
}


@app.exception_handler(RemoteAPIError)
async def remote_api_exception_handler(request: Request, exc: RemoteAPIError):
    upstream = (exc.details or {}).get("upstreamStatus")
    logger.warning(
        "%s %s: platform answered %s (%s)", request.method, request.url.path, upstream or "nothing", exc.detail
    )
    return JSONResponse(status_code=exc.status_code, content=error_content(exc.code, str(exc.detail), exc.details))


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    if isinstance(exc, APIError):
        code, details = exc.code, exc.details
    else:
        fallback = "INTERNAL_ERROR" if exc.status_code >= 500 else "CLIENT_ERROR"
        code, details = STATUS_CODES.get(exc.status_code, fallback), None
    if exc.status_code == status.HTTP_409_CONFLICT:
        logger.info("%s %s refused: %s", request.method, request.url.path, exc.detail)
    return JSONResponse(status_code=exc.status_code, content=error_content(code, str(exc.detail), details))


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    fields = [".".join(str(item) for item in err.get("loc", []) if item not in ("body", "query", "path")) for err in errors]
    first = errors[0] if errors else {}
    details = {"field": fields[0] if fields else "", "reason": first.get("msg"), "fields": fields}
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_content("VALIDATION_ERROR", "Request is invalid", details),
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_content("INTERNAL_ERROR", "Something went wrong on our side"),
    )
