"""
Video Module Integration.

Wires the ingestion pipeline together. Every collaborator can be injected,
which is how tests swap in fakes for ffprobe, ffmpeg and S3.
"""

import logging
from typing import Optional

from ..core.config import Config
from ..storage.manager import TempStorageManager

# Domain interfaces
from .domain.interfaces import VideoRepository, MediaInspector, MediaRemuxer, ObjectStore, TokenValidator

# Infrastructure implementations
from .infrastructure.repositories import InMemoryVideoRepository
from .infrastructure.converters import FFmpegFastStartRemuxer
from .infrastructure.metadata_extractors import FFprobeMediaInspector
from .infrastructure.object_store import S3ObjectStore
from .infrastructure.auth import JWTTokenValidator

# Application services
from .application.ingestion_service import IngestionService
from .application.video_service import VideoService

# Presentation layer
from .presentation.controllers import VideoController
from .presentation.routes import create_video_routes


class VideoModule:
    """
    Composition root for video ingestion.

    Builds the default infrastructure for anything not passed in, then the
    application services and the HTTP controller on top of them.
    """

    def __init__(
        self,
        config: Config,
        video_repository: Optional[VideoRepository] = None,
        temp_storage: Optional[TempStorageManager] = None,
        media_inspector: Optional[MediaInspector] = None,
        media_remuxer: Optional[MediaRemuxer] = None,
        object_store: Optional[ObjectStore] = None,
        token_validator: Optional[TokenValidator] = None
    ):
        self.config = config
        self.logger = logging.getLogger(__name__)

        # Infrastructure layer
        self.video_repository = video_repository or InMemoryVideoRepository()
        self.temp_storage = temp_storage or TempStorageManager(config)
        self.media_inspector = media_inspector or FFprobeMediaInspector(config.media.ffprobe_path)
        self.media_remuxer = media_remuxer or FFmpegFastStartRemuxer(config.media.ffmpeg_path)
        self.object_store = object_store or S3ObjectStore(config.s3)
        self.token_validator = token_validator or JWTTokenValidator(config.auth)

        # Application layer
        self.video_service = VideoService(
            video_repository=self.video_repository,
            object_store=self.object_store,
            presign_ttl_seconds=config.s3.presign_ttl_seconds
        )

        self.ingestion_service = IngestionService(
            video_repository=self.video_repository,
            temp_storage=self.temp_storage,
            media_inspector=self.media_inspector,
            media_remuxer=self.media_remuxer,
            object_store=self.object_store,
            video_service=self.video_service,
            storage_config=config.storage
        )

        # Presentation layer
        self.video_controller = VideoController(
            ingestion_service=self.ingestion_service,
            video_service=self.video_service,
            token_validator=self.token_validator
        )

        self.logger.info("Video module initialized successfully")

    def get_api_routes(self):
        """Get FastAPI routes for video functionality"""
        return create_video_routes(video_controller=self.video_controller)

    def get_module_status(self) -> dict:
        return {
            "video_repository": type(self.video_repository).__name__,
            "media_inspector": type(self.media_inspector).__name__,
            "media_remuxer": type(self.media_remuxer).__name__,
            "object_store": type(self.object_store).__name__,
            "scratch_root": str(self.temp_storage.scratch_root),
            "bucket": self.config.s3.bucket,
        }
