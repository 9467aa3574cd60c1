"""
Video Ingestion Application Service.

Runs an upload through the pipeline:

    validate -> stage -> inspect -> remux -> upload -> record -> clean up

Each step needs the artifact of the previous one, so nothing runs
concurrently. The first failure ends the request; scratch files are removed
on every way out once staging has begun.
"""

import dataclasses
import logging
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional

import aiofiles

from ...core.config import StorageConfig
from ...core.errors import BadRequest, Forbidden, NotFound
from ...core.logging_config import get_performance_logger
from ...storage.manager import TempStorageManager
from ..domain.interfaces import VideoRepository, MediaInspector, MediaRemuxer, ObjectStore
from ..domain.models import StoredObjectReference, Upload, VideoRecord
from .video_service import VideoService


SIZE_UNITS = (("GB", 1 << 30), ("MB", 1 << 20), ("KB", 1 << 10))


def format_size(size: int) -> str:
    """Largest unit that divides size evenly, e.g. 1 GB, 512 KB, 1500 bytes"""
    for unit, factor in SIZE_UNITS:
        if size >= factor and size % factor == 0:
            return f"{size // factor} {unit}"
    return f"{size} bytes"


def check_upload_size(size: Optional[int], max_size: int) -> None:
    if size is not None and size > max_size:
        raise BadRequest(f"Video file is too large (max {format_size(max_size)})")


def validate_upload(upload: Optional[Upload], max_size: int, allowed_content_types: Iterable[str]) -> Upload:
    if upload is None:
        raise BadRequest("No video file provided")
    check_upload_size(upload.size, max_size)
    if upload.content_type not in allowed_content_types:
        raise BadRequest(f"Unsupported video file type: {upload.content_type or 'unknown'}")
    return upload


class IngestionService:
    """Application service for video uploads"""

    def __init__(
        self,
        video_repository: VideoRepository,
        temp_storage: TempStorageManager,
        media_inspector: MediaInspector,
        media_remuxer: MediaRemuxer,
        object_store: ObjectStore,
        video_service: VideoService,
        storage_config: StorageConfig
    ):
        self.video_repository = video_repository
        self.temp_storage = temp_storage
        self.media_inspector = media_inspector
        self.media_remuxer = media_remuxer
        self.object_store = object_store
        self.video_service = video_service
        self.storage_config = storage_config
        self.logger = logging.getLogger(__name__)

    async def upload_video(self, user_id: str, video_id: str, upload: Optional[Upload]) -> VideoRecord:
        """
        Ingest upload as the video for video_id.

        Returns the updated record with a freshly signed video_url. The stored
        record keeps the object key.
        """
        record = await self.get_owned_record(user_id, video_id)
        upload = validate_upload(upload, self.storage_config.max_upload_size_bytes, self.storage_config.allowed_content_types)

        performance_logger = get_performance_logger("ingestion")
        performance_logger.start_timer(f"ingest {video_id}")

        with self.temp_storage.session() as scratch:
            staged_path = scratch.allocate(upload.extension, purpose="staged upload")
            await self._stage(upload, staged_path)

            aspect_bucket = await self.media_inspector.inspect(staged_path)
            reference = StoredObjectReference(aspect_bucket=aspect_bucket, name=staged_path.name)
            self.logger.info(f"Uploading video {reference.key} by user {user_id}")

            # Registered before ffmpeg runs so a partial output is removed too
            scratch.track(self.media_remuxer.output_path_for(staged_path), purpose="fast-start remux")
            processed_path = await self.media_remuxer.remux(staged_path)

            await self.object_store.upload(reference.key, processed_path, "video/mp4")

            record = await self._record(record, reference)

        performance_logger.end_timer(f"ingest {video_id}")
        return self.video_service.sign_record(record)

    async def get_owned_record(self, user_id: str, video_id: str) -> VideoRecord:
        """Record for video_id if user_id may replace its video"""
        if not video_id:
            raise BadRequest("Invalid video ID")

        record = await self.video_repository.get_by_id(video_id)
        if record is None:
            raise NotFound("Couldn't find video")

        if not record.is_owned_by(user_id):
            raise Forbidden("You do not have permission to modify this video")

        return record

    async def _stage(self, upload: Upload, path: Path) -> None:
        async with aiofiles.open(path, "wb") as f:
            await f.write(upload.data)
        self.logger.debug(f"Staged {upload.size} bytes at {path}")

    async def _record(self, record: VideoRecord, reference: StoredObjectReference) -> VideoRecord:
        updated = dataclasses.replace(record, video_url=reference.key, updated_at=datetime.now())
        await self.video_repository.update(updated)
        self.logger.info(f"Video {record.video_id} now stored at {reference.key}")
        return updated
