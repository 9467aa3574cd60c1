"""
Video Ingest Service

Accepts MP4 uploads, remuxes them for fast-start playback, stores them in S3
under an aspect-ratio prefix and hands back time-limited signed URLs.
"""

__version__ = "1.0.0"
__author__ = "Video Ingest Team"

from .main import VideoIngestSystem

__all__ = ["VideoIngestSystem"]
