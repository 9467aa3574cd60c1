"""
Video Module for the Video Ingest Service.

This module stages, inspects, remuxes and uploads videos, following clean
architecture principles.
"""

from .domain.models import AspectBucket, Upload, VideoRecord, StoredObjectReference
from .application.ingestion_service import IngestionService
from .application.video_service import VideoService
from .integration import VideoModule

__all__ = ["AspectBucket", "Upload", "VideoRecord", "StoredObjectReference", "IngestionService", "VideoService", "VideoModule"]
