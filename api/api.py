from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse, Response
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR

from api.config import get_repository, get_settings
from api.routes.assessment_routes import assessment_routes
from api.routes.auth_routes import auth_routes
from api.routes.code_routes import code_routes
from api.routes.course_routes import course_routes
from api.routes.health_routes import health_routes
from api.routes.learning_path_routes import learning_path_routes
from api.routes.user_routes import user_routes
from api.utils.logger import clear_request_id, configure_logging, set_request_id
from migrations.data_migration import run_migration

settings = get_settings()
logger = configure_logging(log_dir=settings.log_dir, level=settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    repo = app.dependency_overrides.get(get_repository, get_repository)()
    changed = run_migration(repo)
    logger.info("startup data_dir=%s migrated=%s collections=%s", repo.data_dir, changed, repo.stats())
    yield


app = FastAPI(title="Apex API", version="1.0.0", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_logger(request: Request, call_next):
    rid = set_request_id(request.headers.get("x-request-id"))
    try:
        logger.info("request start method=%s path=%s client=%s", request.method, request.url.path, request.client)
        response: Response = await call_next(request)
        logger.info("request end status=%s method=%s path=%s", response.status_code, request.method, request.url.path)
        response.headers["x-request-id"] = rid
        return response
    except Exception:
        logger.exception("request error method=%s path=%s", request.method, request.url.path)
        raise
    finally:
        clear_request_id()


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Log server-side errors with stack traces; client errors as warnings.
    if exc.status_code >= 500:
        logger.exception("http error status=%s method=%s path=%s detail=%s", exc.status_code, request.method, request.url.path, exc.detail)
    else:
        logger.warning("http error status=%s method=%s path=%s detail=%s", exc.status_code, request.method, request.url.path, exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"message": exc.detail}, headers=getattr(exc, "headers", None))


def _describe(error: dict) -> str:
    loc = ".".join(str(p) for p in error.get("loc", ()) if p != "body")
    return f"{loc}: {error.get('msg')}" if loc else str(error.get("msg"))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    logger.warning("validation error method=%s path=%s errors=%s", request.method, request.url.path, errors)
    message = _describe(errors[0]) if errors else "Invalid request"
    return JSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={"message": message, "errors": [_describe(e) for e in errors]},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    # Never leak internal exception details to clients.
    logger.exception("unhandled error method=%s path=%s", request.method, request.url.path)
    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


@app.get("/")
def read_root():
    return {"message": "ApeX API Server", "version": "1.0.0", "environment": settings.node_env}


app.include_router(health_routes)
app.include_router(auth_routes, prefix="/api/auth")
app.include_router(course_routes, prefix="/api")
app.include_router(user_routes, prefix="/api/user")
app.include_router(learning_path_routes, prefix="/api/learning-paths")
app.include_router(assessment_routes, prefix="/api/skill-assessments")
app.include_router(code_routes, prefix="/api")

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
