import logging
import time

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import CORS_ORIGINS, LOG_LEVEL, PORT
from app.database.connection import close_connection
from app.routers import fitness_plans, users
from app.services.plan_store import PlanStore

# Configure logging
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "Cross-Origin-Resource-Policy": "same-origin",
}

app = FastAPI(title="Fitness Planner API", version="1.0.0")

app.add_middleware(GZipMiddleware, minimum_size=1000)

# CORS middleware to allow frontend communication
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.middleware("http")
async def security_headers(request: Request, call_next):
    response = await call_next(request)
    for header, value in SECURITY_HEADERS.items():
        response.headers.setdefault(header, value)
    return response

@app.middleware("http")
async def access_log(request: Request, call_next):
    started = time.perf_counter()
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(f"{request.method} {request.url.path} {status_code} {elapsed_ms:.1f}ms")

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid input", "details": jsonable_encoder(exc.errors())},
    )

@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    # served outside the middleware stack, so the headers are set here
    return JSONResponse(status_code=500, content={"error": "Something went wrong!"}, headers=SECURITY_HEADERS)

app.include_router(users.router)
app.include_router(fitness_plans.router)

@app.on_event("startup")
def _app_startup():
    # Ensure plan indexes exist (idempotent)
    try:
        PlanStore.ensure_indexes()
    except Exception as e:
        logger.warning(f"Could not ensure fitness plan indexes: {e}")

@app.on_event("shutdown")
def _app_shutdown():
    close_connection()

@app.get("/")
def home():
    return {"message": "Fitness Planner API Running"}

@app.get("/api/health")
def health_check():
    """Liveness probe"""
    return {"status": "ok", "message": "Fitness Planner API is running"}

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=PORT)
