"""
FastAPI Server for the Video Ingest Service.

This module builds the FastAPI application, renders errors as a JSON envelope
and runs the app under uvicorn.
"""

import logging
from datetime import datetime

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn

from ..core.config import Config
from ..core.errors import IngestError
from ..core.logging_config import get_error_tracker
from ..video.integration import VideoModule


def validation_message(exc: RequestValidationError) -> str:
    """One line for the error envelope; a bad 'video' field means there is no file"""
    errors = exc.errors()
    if any("video" in error.get("loc", ()) for error in errors):
        return "No video file provided"
    return errors[0].get("msg", "Invalid request") if errors else "Invalid request"


class APIServer:
    """FastAPI server for the Video Ingest Service"""

    def __init__(self, config: Config, video_module: VideoModule):
        self.config = config
        self.video_module = video_module
        self.logger = logging.getLogger(__name__)
        self.error_tracker = get_error_tracker("api")

        self.app = FastAPI(title="Video Ingest API", description="Upload, fast-start remux and storage of MP4 videos", version="1.0.0")

        self.server_start_time = datetime.now()

        # Setup CORS
        self.app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_credentials=True, allow_methods=["*"], allow_headers=["*"])  # Configure appropriately for production

        self._setup_exception_handlers()
        self._setup_routes()

    def _setup_exception_handlers(self):
        @self.app.exception_handler(IngestError)
        async def handle_ingest_error(request: Request, exc: IngestError):
            if exc.is_internal:
                # Diagnostic detail stays in the logs
                self.error_tracker.log_error(exc, context=f"{request.method} {request.url.path}")
                return JSONResponse(status_code=exc.status_code, content={"error": exc.public_message})

            self.logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
            return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

        @self.app.exception_handler(RequestValidationError)
        async def handle_validation_error(request: Request, exc: RequestValidationError):
            self.logger.info(f"{request.method} {request.url.path} -> 400: {exc.errors()}")
            return JSONResponse(status_code=400, content={"error": validation_message(exc)})

        @self.app.exception_handler(StarletteHTTPException)
        async def handle_http_error(request: Request, exc: StarletteHTTPException):
            return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=getattr(exc, "headers", None))

        @self.app.exception_handler(Exception)
        async def handle_unexpected_error(request: Request, exc: Exception):
            self.error_tracker.log_error(exc, context=f"{request.method} {request.url.path}")
            return JSONResponse(status_code=500, content={"error": "Internal server error"})

    def _setup_routes(self):
        @self.app.get("/health")
        async def health_check():
            uptime = (datetime.now() - self.server_start_time).total_seconds()
            return {"status": "healthy", "timestamp": datetime.now().isoformat(), "uptime_seconds": uptime}

        @self.app.get("/system/status")
        async def get_system_status():
            return {
                "video_module": self.video_module.get_module_status(),
                "errors": self.error_tracker.get_error_stats(),
            }

        self.app.include_router(self.video_module.get_api_routes())

    def run(self) -> None:
        """Run the uvicorn server (blocking call)"""
        self.logger.info(f"Starting API server on {self.config.system.api_host}:{self.config.system.api_port}")
        uvicorn.run(self.app, host=self.config.system.api_host, port=self.config.system.api_port, log_level="info")
