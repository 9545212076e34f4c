from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
import os

from projecthub.endpoints.router import api_router
from projecthub.config.settings import settings
from projecthub.utils.db_utils import init_db
from projecthub.utils.logger import get_logger
from projecthub.exceptions import (
    BaseAPIException,
    base_api_exception_handler,
    validation_exception_handler,
    unhandled_exception_handler,
)

logger = get_logger(__name__)

# Create tables if they don't exist
init_db()


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.PROJECT_VERSION
)

app.add_exception_handler(BaseAPIException, base_api_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Uploads directory
os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR), name="uploads")

# Include API Router
app.include_router(api_router)

@app.on_event("startup")
def startup_event():
    """
    Execute startup tasks.
    """
    logger.info(f"{settings.PROJECT_NAME} {settings.PROJECT_VERSION} started, uploads in {settings.UPLOAD_DIR}")

@app.get("/")
def root():
    """
    Root endpoint for health check.
    """
    return {"message": f"Welcome to {settings.PROJECT_NAME}"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("projecthub.main:app", host="0.0.0.0", port=settings.PORT, reload=True)
