"""
Video Application Service.

Read-side use cases: fetch a record and hand it back with a signed URL.
"""

import dataclasses
import logging

from ...core.errors import NotFound
from ..domain.interfaces import VideoRepository, ObjectStore
from ..domain.models import VideoRecord


class VideoService:
    """Application service for reading video records"""

    def __init__(self, video_repository: VideoRepository, object_store: ObjectStore, presign_ttl_seconds: int = 300):
        self.video_repository = video_repository
        self.object_store = object_store
        self.presign_ttl_seconds = presign_ttl_seconds
        self.logger = logging.getLogger(__name__)

    async def get_signed_video(self, video_id: str) -> VideoRecord:
        record = await self.video_repository.get_by_id(video_id)
        if record is None:
            raise NotFound("Couldn't find video")
        return self.sign_record(record)

    def sign_record(self, record: VideoRecord) -> VideoRecord:
        """
        Copy of record whose video_url is a presigned URL for its stored key.

        A record without a stored key is returned unchanged. The signed URL is
        never written back to the repository.
        """
        if not record.video_url:
            return record

        self.logger.debug(f"Signing key {record.video_url} for {self.presign_ttl_seconds}s")
        signed_url = self.object_store.sign(record.video_url, self.presign_ttl_seconds)
        return dataclasses.replace(record, video_url=signed_url)
