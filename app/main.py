from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from contextlib import asynccontextmanager
import logging

from app.config import settings
from app.database import Store
from app.errors import AppError, StoreError
from app.api import auth, customers, dues, orders

# Configure logging
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Open the store before accepting requests and close it on shutdown.
    Handlers reach it through app.state.store.
    """
    store = Store(settings.DATABASE_URL)
    store.open(
        create_tables=settings.AUTO_CREATE_TABLES,
        max_retries=settings.DB_CONNECT_RETRIES,
        delay=settings.DB_CONNECT_DELAY,
    )
    app.state.store = store

    logger.info("=" * 80)
    logger.info("REGISTERED ROUTES AT STARTUP:")
    for route in app.routes:
        if hasattr(route, 'path') and hasattr(route, 'methods'):
            logger.info(f"  {sorted(route.methods)} {route.path}")
    logger.info("=" * 80)

    try:
        yield
    finally:
        store.close()


# Create FastAPI app
app = FastAPI(
    title="Recharge Dues API",
    description="Customers, recharge orders and outstanding dues",
    version="1.0.0",
    lifespan=lifespan
)


def _error_response(exc: AppError) -> JSONResponse:
    content = exc.to_dict()
    if isinstance(exc, StoreError) and settings.EXPOSE_ERROR_DETAILS and exc.cause is not None:
        content["details"] = str(exc.cause)
    return JSONResponse(status_code=exc.status_code, content=content)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return _error_response(exc)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    details = [
        {"loc": [str(part) for part in err.get("loc", ())], "msg": err.get("msg")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid request", "details": details},
    )


@app.exception_handler(SQLAlchemyError)
async def store_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"STORE ERROR on {request.method} {request.url.path}: {exc}", exc_info=True)
    return _error_response(StoreError("A database error occurred", cause=exc))


# Global Exception Handler to prevent raw text "Internal Server Error"
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"GLOBAL ERROR: {str(exc)}", exc_info=True)
    content = {"error": "Internal server error"}
    if settings.EXPOSE_ERROR_DETAILS:
        content["details"] = str(exc)
    return JSONResponse(status_code=500, content=content)


# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router)
app.include_router(customers.router)
app.include_router(orders.router)
app.include_router(dues.router)


# Health check
@app.get("/health")
def health_check(request: Request, response: Response):
    """Health check endpoint"""
    store: Store = request.app.state.store
    db_health = store.check_health()

    if not db_health:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return {
        "status": "healthy" if db_health else "unhealthy",
        "version": "1.0.0",
        "database": "connected" if db_health else "disconnected",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)
