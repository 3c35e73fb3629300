"""
Files Manager FastAPI Application

A REST API server for the token-authenticated hierarchical file store.
Provides endpoints for registering users, opening and closing sessions,
uploading folders/files/images, and reading them back.
"""

from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Header, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, Field

from files_manager.config import Config
from files_manager.core.factory import BlobStoreFactory, DocumentStoreFactory, KeyValueStoreFactory
from files_manager.services.files_engine import FilesManagerEngine
from files_manager.utils.exceptions import FilesManagerError, ServiceUnavailableError
from files_manager.utils.logger import get_logger, setup_logging

# Global engine instance
engine: FilesManagerEngine | None = None
logger = get_logger(__name__)


# Pydantic models for API
class NewUserRequest(BaseModel):
    """Request model for registering a user."""

    email: str | None = None
    password: str | None = None


class UploadRequest(BaseModel):
    """Request model for uploading a folder, file or image."""

    name: str | None = None
    type: str | None = None
    parentId: str | int = Field(default=0, description="0 for root or a folder ID")
    isPublic: bool = False
    data: str | None = Field(default=None, description="Base64 payload for files and images")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup/shutdown."""
    global engine

    config = Config.from_env()

    setup_logging(
        level=config.logging.level,
        log_to_file=config.logging.log_to_file,
        log_dir=config.logging.log_dir,
        file_rotation=config.logging.file_rotation,
        file_retention=config.logging.file_retention,
        compression=config.logging.compression,
        serialize=config.logging.serialize,
    )

    logger.info("Starting Files Manager server")
    logger.info(
        f"Configuration: kv={config.kv_backend}, documents={config.document_backend}, "
        f"storage={config.storage.folder_path}"
    )

    engine = FilesManagerEngine(
        kv_store=KeyValueStoreFactory.create(config),
        document_store=DocumentStoreFactory.create(config),
        blob_store=BlobStoreFactory.create(config.storage),
        config=config,
    )
    await engine.initialize()

    yield

    logger.info("Shutting down Files Manager server")
    await engine.close()
    engine = None
    logger.info("Cleanup complete")


app = FastAPI(
    title="Files Manager API",
    description="Token-authenticated hierarchical file store",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(FilesManagerError)
async def files_manager_error_handler(request: Request, exc: FilesManagerError):
    """Map domain errors to status codes without leaking store diagnostics."""
    if exc.status_code == 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message} {exc.context}")
        return JSONResponse(status_code=exc.status_code, content={"error": "Internal Server Error"})
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"error": "Invalid request"})


def get_engine() -> FilesManagerEngine:
    if not engine:
        raise ServiceUnavailableError()
    return engine


def internal_error(action: str, error: Exception) -> FilesManagerError:
    logger.exception(f"Error {action}: {error}")
    return FilesManagerError("Internal Server Error")


# Status endpoints
@app.get("/status")
async def get_status():
    """Liveness of the token cache, the document store and blob storage."""
    return await get_engine().get_status()


@app.get("/stats")
async def get_stats():
    """Number of registered users and stored entries."""
    try:
        return await get_engine().get_statistics()
    except FilesManagerError:
        raise
    except Exception as e:
        raise internal_error("getting stats", e) from e


# User endpoints
@app.post("/users", status_code=201)
async def create_user(request: NewUserRequest):
    """
    Register a new user.

    The password is stored hashed; the response only carries the new ID and
    the email.
    """
    current = get_engine()
    try:
        user = await current.auth.register(request.email, request.password)
        return user.to_public_dict()
    except FilesManagerError:
        raise
    except Exception as e:
        raise internal_error("creating user", e) from e


@app.get("/users/me")
async def get_me(x_token: str | None = Header(default=None)):
    """Return the user owning the X-Token session."""
    current = get_engine()
    try:
        user = await current.auth.me(x_token)
        return user.to_public_dict()
    except FilesManagerError:
        raise
    except Exception as e:
        raise internal_error("retrieving user", e) from e


# Session endpoints
@app.get("/connect")
async def connect(authorization: str | None = Header(default=None)):
    """
    Open a session from ``Authorization: Basic base64(email:password)``.

    Malformed headers and wrong credentials both answer 401.
    """
    current = get_engine()
    try:
        session = await current.auth.connect(authorization)
        return {"token": session.token}
    except FilesManagerError:
        raise
    except Exception as e:
        raise internal_error("authenticating", e) from e


@app.get("/disconnect", status_code=204)
async def disconnect(x_token: str | None = Header(default=None)):
    """Revoke the X-Token session."""
    current = get_engine()
    try:
        await current.auth.disconnect(x_token)
        return Response(status_code=204)
    except FilesManagerError:
        raise
    except Exception as e:
        raise internal_error("disconnecting", e) from e


# File endpoints
@app.post("/files", status_code=201)
async def upload_file(request: UploadRequest, x_token: str | None = Header(default=None)):
    """
    Create a folder, file or image.

    Folders are stored as metadata only. Files and images have their base64
    payload written to blob storage first; the metadata record is inserted
    only after the write succeeded.
    """
    current = get_engine()
    try:
        created = await current.files.upload(
            token=x_token,
            name=request.name,
            kind=request.type,
            parent_id=request.parentId,
            is_public=request.isPublic,
            data=request.data,
        )
        return created.entry.to_public_dict()
    except FilesManagerError:
        raise
    except Exception as e:
        raise internal_error("uploading file", e) from e


@app.get("/files/{file_id}")
async def get_file(file_id: str, x_token: str | None = Header(default=None)):
    """Retrieve one entry owned by the caller or marked public."""
    current = get_engine()
    try:
        entry = await current.files.fetch(x_token, file_id)
        return entry.to_public_dict()
    except FilesManagerError:
        raise
    except Exception as e:
        raise internal_error("getting file", e) from e


@app.get("/files")
async def list_files(
    x_token: str | None = Header(default=None),
    parent_id: str = Query(default="0", alias="parentId"),
    page: int = Query(default=0),
) -> list[dict[str, Any]]:
    """List the caller's entries under ``parentId``, 20 per page."""
    current = get_engine()
    try:
        entries = await current.files.list_entries(x_token, parent_id, page)
        return [entry.to_public_dict() for entry in entries]
    except FilesManagerError:
        raise
    except Exception as e:
        raise internal_error("listing files", e) from e


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "name": "Files Manager API",
        "version": "1.0.0",
        "description": "Token-authenticated hierarchical file store",
        "docs": "/docs",
        "status": "/status",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app:app", host="0.0.0.0", port=5000, reload=True, log_level="info")
