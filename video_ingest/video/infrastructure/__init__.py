"""
Video Infrastructure Layer.

Contains implementations of domain interfaces using external dependencies
like FFmpeg, ffprobe, S3 and JWT.
"""

from .repositories import InMemoryVideoRepository
from .converters import FFmpegFastStartRemuxer
from .metadata_extractors import FFprobeMediaInspector
from .object_store import S3ObjectStore
from .auth import JWTTokenValidator, get_bearer_token

__all__ = [
    "InMemoryVideoRepository",
    "FFmpegFastStartRemuxer",
    "FFprobeMediaInspector",
    "S3ObjectStore",
    "JWTTokenValidator",
    "get_bearer_token",
]
