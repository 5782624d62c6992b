from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from vyeya.api.v1 import router as api_router
from vyeya.core.config import settings
from vyeya.core.database import init_db
from vyeya.core.errors import VyeyaError
from vyeya.core.logging_config import configure_logging
import logging

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Gestiona el ciclo de vida de la aplicación.

    Startup: crea las tablas y avisa si se usa el secreto JWT de desarrollo.
    Shutdown: solo registra el cierre.
    """
    logger.info("Iniciando aplicación Vyeya...")
    if settings.using_dev_secret:
        logger.warning("SECRET_KEY no configurada, los tokens se firman con el secreto de desarrollo")
    init_db()
    logger.info("Aplicación iniciada exitosamente")

    yield

    logger.info("Cerrando aplicación Vyeya...")


app = FastAPI(
    title="Vyeya API",
    description="Producer-to-consumer marketplace backend",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(VyeyaError)
async def vyeya_error_handler(request: Request, exc: VyeyaError):
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(
        status_code=exc.status_code, content={"error": exc.message}, headers=headers
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    # Se reporta solo el primer error, con el mismo formato {"error": ...}
    errors = exc.errors()
    first = errors[0] if errors else {}
    loc = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    msg = first.get("msg", "Invalid request")
    return JSONResponse(
        status_code=400, content={"error": f"{loc}: {msg}" if loc else msg}
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Error no controlado en {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"error": "Something went wrong!"})


app.include_router(api_router.api_router, prefix="/api/v1")


@app.get("/")
def root():
    """
    Root endpoint
    """
    return {"message": "Vyeya API", "version": "1.0.0"}
