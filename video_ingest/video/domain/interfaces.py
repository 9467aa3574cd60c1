"""
Video Domain Interfaces.

Abstract interfaces that define contracts for the ingestion pipeline.
These interfaces allow dependency inversion - domain logic doesn't depend on infrastructure.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from .models import AspectBucket, VideoRecord


class VideoRepository(ABC):
    """Record store owning video rows"""

    @abstractmethod
    async def get_by_id(self, video_id: str) -> Optional[VideoRecord]:
        """Get video record by ID"""
        pass

    @abstractmethod
    async def update(self, record: VideoRecord) -> None:
        """Persist changes to an existing record"""
        pass


class MediaInspector(ABC):
    """Reads stream geometry from a local video file"""

    @abstractmethod
    async def inspect(self, file_path: Path) -> AspectBucket:
        """Classify the first video stream; raises ProbeFailure"""
        pass


class MediaRemuxer(ABC):
    """Rewrites a container so its index sits before the media data"""

    @abstractmethod
    def output_path_for(self, input_path: Path) -> Path:
        """Path remux() will write for this input"""
        pass

    @abstractmethod
    async def remux(self, input_path: Path) -> Path:
        """Write the fast-start variant and return its path; raises RemuxFailure"""
        pass


class ObjectStore(ABC):
    """Durable remote storage for finished videos"""

    @abstractmethod
    async def upload(self, key: str, file_path: Path, content_type: str) -> None:
        """Store a local file under key; raises UploadFailure"""
        pass

    @abstractmethod
    def sign(self, key: str, ttl_seconds: int) -> str:
        """Time-limited retrieval URL for key"""
        pass


class TokenValidator(ABC):
    """Maps a bearer credential to a user ID"""

    @abstractmethod
    def validate(self, token: str) -> str:
        """Return the user ID; raises Unauthorized"""
        pass
