import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .errors import ApiError
from .routers import todos as todos_router
from .routers import users as users_router
from .settings import get_settings
from .store import Store, get_store

openapi_tags = [
    {"name": "health", "description": "Service health and status endpoints."},
    {"name": "users", "description": "User accounts and the pro plan."},
    {
        "name": "todos",
        "description": "CRUD operations for the todos of the user named in the `username` header.",
    },
]

_settings = get_settings()

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure the root logger. Left to the host application when the package is only imported."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(_settings.log_level)
    yield


app = FastAPI(
    title="User Todos Backend",
    description="Backend API service for user accounts and their todos, kept in memory.",
    version="0.1.0",
    openapi_tags=openapi_tags,
    lifespan=lifespan,
)

# Configure CORS based on settings (.env -> CORS_ALLOW_ORIGINS), with '*' fallback
allow_all = (_settings.cors_allow_origins == ["*"]) or (len(_settings.cors_allow_origins) == 0)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if allow_all else _settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    """
    Render rejected requests as `{"error": "<message>"}`.
    """
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


# Global exception handlers for consistent JSON on validation errors
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Return a consistent JSON structure for request validation errors.

    Response format:
        {
            "error": "ValidationError",
            "detail": [... pydantic/fastapi error details ...],
            "message": "Request validation failed"
        }
    """
    logger.info("Rejected request to %s: body validation failed", request.url.path)
    return JSONResponse(
        status_code=422,
        content={
            "error": "ValidationError",
            "message": "Request validation failed",
            "detail": jsonable_encoder(exc.errors()),
        },
    )


# PUBLIC_INTERFACE
@app.get("/", summary="Health Check", tags=["health"])
def health_check(store: Store = Depends(get_store)):
    """
    Health check endpoint.

    Returns:
        A JSON object indicating service health and the number of users held in memory.
    """
    return {"message": "Healthy", "users": len(store.users)}


# Include routers
app.include_router(users_router.router)
app.include_router(todos_router.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=_settings.host, port=_settings.port)
