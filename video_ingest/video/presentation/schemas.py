"""
Video API Request/Response Schemas.

Pydantic models for API serialization.
"""

from typing import Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field


class VideoResponse(BaseModel):
    """Video record as returned to the caller"""
    video_id: str = Field(..., description="Video identifier")
    user_id: str = Field(..., description="Owner of the video")
    title: str = Field("", description="Video title")
    description: str = Field("", description="Video description")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")
    thumbnail_url: Optional[str] = Field(None, description="Thumbnail data URI or URL")
    video_url: Optional[str] = Field(None, description="Time-limited signed URL for the video")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "video_id": "0b6a6f2e-3c57-4a0e-9a53-2f7f1f1f2a10",
                "user_id": "4f1b5c6e-8d2a-4c1e-bb1f-8f4d2d7b9a11",
                "title": "Boots on the ground",
                "description": "First test upload",
                "created_at": "2025-08-04T14:30:22",
                "updated_at": "2025-08-04T14:32:22",
                "thumbnail_url": None,
                "video_url": "https://video-ingest.s3.amazonaws.com/landscape/abc.mp4?X-Amz-Expires=300"
            }
        }
    )


class ErrorResponse(BaseModel):
    """JSON error envelope"""
    error: str = Field(..., description="Human readable error message")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error": "Video file is too large (max 1024 MB)"
            }
        }
    )
