"""
RobotikHub Portal - Main Application
Portal keanggotaan klub robotik
"""
import logging
import os
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from robotikhub.config import get_settings
from robotikhub.database import init_db
from robotikhub.exceptions import PortalError
from robotikhub.api.routes import router
from robotikhub.api.auth_routes import router as auth_router
from robotikhub.api.user_routes import router as user_router
from robotikhub.api.gallery_routes import router as gallery_router
from robotikhub.api.learning_routes import router as learning_router
from robotikhub.api.activity_routes import router as activity_router
from robotikhub.api.profile_routes import router as profile_router
from robotikhub.api.achievement_routes import router as achievement_router

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

os.makedirs(settings.upload_dir, exist_ok=True)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    # Startup
    logger.info("RobotikHub Portal starting...")
    init_db()
    logger.info(f"Uploads directory: {settings.upload_dir}")
    logger.info("Ready to accept connections")

    yield

    # Shutdown
    logger.info("RobotikHub Portal stopped")


# Create FastAPI app
app = FastAPI(
    title="RobotikHub Portal",
    description="Portal keanggotaan klub robotik: anggota, agenda, absensi, materi, galeri dan profil klub",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(PortalError)
async def portal_error_handler(request: Request, exc: PortalError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message, "error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Input tidak valid dilaporkan sebagai 400 dengan pesan yang bisa dibaca"""
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", []) if part != "body")
        message = f"{field}: {first.get('msg')}" if field else first.get("msg")
    else:
        message = "Data tidak valid"
    return JSONResponse(status_code=400, content={"detail": message, "error": message})


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    """Route tidak ada, method salah, dsb. memakai envelope yang sama"""
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "error": exc.detail},
        headers=getattr(exc, "headers", None)
    )


# Uploaded files
app.mount("/uploads", StaticFiles(directory=settings.upload_dir), name="uploads")

# Include API routes
app.include_router(router)
app.include_router(auth_router)
app.include_router(user_router)
app.include_router(gallery_router)
app.include_router(learning_router)
app.include_router(activity_router)
app.include_router(profile_router)
app.include_router(achievement_router)


@app.get("/api-info")
async def api_info():
    """API Info endpoint"""
    return {
        "name": "RobotikHub Portal",
        "version": "1.0.0",
        "features": ["Authentication", "Members", "Activities", "Attendance", "Learning", "Gallery", "Club Profile", "Achievements"],
        "docs": "/docs"
    }
