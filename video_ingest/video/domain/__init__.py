"""
Video Domain Layer.

Contains pure business logic and domain models for video ingestion.
No external dependencies - only Python standard library and domain concepts.
"""

from .models import AspectBucket, VideoGeometry, Upload, StoredObjectReference, VideoRecord
from .interfaces import VideoRepository, MediaInspector, MediaRemuxer, ObjectStore, TokenValidator

__all__ = [
    "AspectBucket",
    "VideoGeometry",
    "Upload",
    "StoredObjectReference",
    "VideoRecord",
    "VideoRepository",
    "MediaInspector",
    "MediaRemuxer",
    "ObjectStore",
    "TokenValidator",
]
