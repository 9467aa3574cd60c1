"""
Video Domain Models.

Pure business entities and value objects for video ingestion.
These models contain no external dependencies and represent core business concepts.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


ASPECT_TOLERANCE = 0.01


class AspectBucket(Enum):
    """Coarse width/height classification used as the object key prefix"""
    LANDSCAPE = "landscape"
    PORTRAIT = "portrait"
    OTHER = "other"

    @classmethod
    def from_ratio(cls, ratio: float) -> "AspectBucket":
        if abs(ratio - 16 / 9) < ASPECT_TOLERANCE:
            return cls.LANDSCAPE
        if abs(ratio - 9 / 16) < ASPECT_TOLERANCE:
            return cls.PORTRAIT
        return cls.OTHER

    @classmethod
    def from_dimensions(cls, width: int, height: int) -> "AspectBucket":
        if width <= 0 or height <= 0:
            raise ValueError(f"Invalid video dimensions {width}x{height}")
        return cls.from_ratio(width / height)


@dataclass(frozen=True)
class VideoGeometry:
    """Width and height of the first video stream"""
    width: int
    height: int

    @property
    def aspect_bucket(self) -> AspectBucket:
        return AspectBucket.from_dimensions(self.width, self.height)


@dataclass(frozen=True)
class Upload:
    """Raw upload as received from the caller"""
    filename: Optional[str]
    content_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def extension(self) -> str:
        """Extension derived from the subtype, e.g. video/mp4 -> mp4"""
        return self.content_type.split("/")[-1]


@dataclass(frozen=True)
class StoredObjectReference:
    """Location of an uploaded video inside the bucket"""
    aspect_bucket: AspectBucket
    name: str

    @property
    def key(self) -> str:
        return f"{self.aspect_bucket.value}/{self.name}"


@dataclass
class VideoRecord:
    """Video record entity; video_url holds the object key once uploaded"""
    video_id: str
    user_id: str
    title: str = ""
    description: str = ""
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)
    thumbnail_url: Optional[str] = None
    video_url: Optional[str] = None

    def __post_init__(self):
        if not self.video_id:
            raise ValueError("Video ID cannot be empty")
        if not self.user_id:
            raise ValueError("User ID cannot be empty")

    def is_owned_by(self, user_id: str) -> bool:
        return self.user_id == user_id
