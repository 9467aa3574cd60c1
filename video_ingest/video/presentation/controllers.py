"""
Video HTTP Controllers.

Translate HTTP requests into service calls and domain records into responses.
"""

import logging
from typing import Mapping, Optional

from fastapi import UploadFile

from ..application.ingestion_service import IngestionService, check_upload_size
from ..application.video_service import VideoService
from ..domain.interfaces import TokenValidator
from ..domain.models import Upload, VideoRecord
from ..infrastructure.auth import get_bearer_token
from .schemas import VideoResponse


class VideoController:
    """Controller for video upload and read operations"""

    def __init__(self, ingestion_service: IngestionService, video_service: VideoService, token_validator: TokenValidator):
        self.ingestion_service = ingestion_service
        self.video_service = video_service
        self.token_validator = token_validator
        self.logger = logging.getLogger(__name__)

    def authenticate(self, headers: Mapping[str, str]) -> str:
        token = get_bearer_token(headers)
        return self.token_validator.validate(token)

    async def upload_video(self, video_id: str, headers: Mapping[str, str], file: Optional[UploadFile]) -> VideoResponse:
        """Handle a multipart upload of the 'video' field"""
        user_id = self.authenticate(headers)

        # A missing record or a foreign owner wins over anything wrong with the file
        await self.ingestion_service.get_owned_record(user_id, video_id)

        upload = None
        if file is not None:
            # Refuse oversized bodies before pulling them into memory
            check_upload_size(file.size, self.ingestion_service.storage_config.max_upload_size_bytes)
            data = await file.read()
            upload = Upload(filename=file.filename, content_type=file.content_type or "", data=data)

        record = await self.ingestion_service.upload_video(user_id=user_id, video_id=video_id, upload=upload)
        return self._convert_to_response(record)

    async def get_video(self, video_id: str, headers: Mapping[str, str]) -> VideoResponse:
        self.authenticate(headers)
        record = await self.video_service.get_signed_video(video_id)
        return self._convert_to_response(record)

    def _convert_to_response(self, record: VideoRecord) -> VideoResponse:
        """Convert domain model to response model"""
        return VideoResponse(
            video_id=record.video_id,
            user_id=record.user_id,
            title=record.title,
            description=record.description,
            created_at=record.created_at,
            updated_at=record.updated_at,
            thumbnail_url=record.thumbnail_url,
            video_url=record.video_url,
        )
