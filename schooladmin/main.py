from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from schooladmin import config
from schooladmin.database import Base, engine
from schooladmin import models  # noqa: F401  registers tables on Base
from schooladmin.exceptions import SchoolAdminError
from schooladmin.logging_config import setup_logging
from schooladmin.middleware import RequestLoggingMiddleware
from schooladmin.routers import analytics as analytics_router
from schooladmin.routers import auth as auth_router
from schooladmin.routers import classes as classes_router
from schooladmin.routers import students as students_router
from schooladmin.routers import teachers as teachers_router
from schooladmin.utils.auth import ensure_default_admin

logger = setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    with Session(engine) as db:
        ensure_default_admin(db)
    logger.info("School admin API started (%s)", config.ENVIRONMENT)
    yield


app = FastAPI(title="School Admin API", lifespan=lifespan)

app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials="*" not in config.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID"],
)


@app.exception_handler(SchoolAdminError)
async def school_admin_error_handler(request: Request, exc: SchoolAdminError):
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=headers)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={"detail": "Invalid input", "code": "INVALID_INPUT", "details": {"errors": errors}},
    )


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error", "code": "INTERNAL_ERROR"})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error("Unhandled exception on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error", "code": "INTERNAL_ERROR"})


app.include_router(auth_router.router, prefix="/api")
app.include_router(classes_router.router, prefix="/api")
app.include_router(teachers_router.router, prefix="/api")
app.include_router(students_router.router, prefix="/api")
app.include_router(analytics_router.router, prefix="/api")


@app.get("/health", tags=["Health"])
def health():
    return {"status": "ok", "app": "School Admin API"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("schooladmin.main:app", host="127.0.0.1", port=8000, reload=True)
