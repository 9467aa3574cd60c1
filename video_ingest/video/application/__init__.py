"""
Video Application Layer.

Contains use cases and application services that orchestrate domain logic
and coordinate between domain and infrastructure layers.
"""

from .ingestion_service import IngestionService, validate_upload, check_upload_size
from .video_service import VideoService

__all__ = [
    "IngestionService",
    "VideoService",
    "validate_upload",
    "check_upload_size",
]
