from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from .routers import plans
from . import config
from .exceptions import PlannerError, ValidationError
import logging
from datetime import datetime, timezone

# Configure logging
logging.basicConfig(
    level=config.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="House Planner API",
    version="1.0.0",
    description="Room explication for the house configurator"
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Global error handlers
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.error(f"Validation error: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "detail": jsonable_errors(exc),
            "message": "Validation error - please check your input"
        }
    )

@app.exception_handler(PlannerError)
async def planner_exception_handler(request: Request, exc: PlannerError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    if isinstance(exc, ValidationError):
        status_code = status.HTTP_400_BAD_REQUEST

    logger.warning(f"{type(exc).__name__}: {exc.message}")
    return JSONResponse(
        status_code=status_code,
        content={
            "error": type(exc).__name__,
            "message": exc.message,
            "details": exc.details
        }
    )

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {str(exc)}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "message": "An internal error occurred. Please try again later.",
            "error": str(exc) if config.ENVIRONMENT == "development" else "Internal server error"
        }
    )


def jsonable_errors(exc: RequestValidationError):
    """Validation errors without the raw exception objects pydantic attaches."""
    return [
        {key: (str(value) if key == 'ctx' else value) for key, value in error.items()}
        for error in exc.errors()
    ]

# Include routers
app.include_router(plans.router)

@app.get("/")
async def root():
    return {
        "message": "House Planner API",
        "version": "1.0.0",
        "status": "running",
        "environment": config.ENVIRONMENT
    }

@app.get("/health")
async def health():
    return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}
