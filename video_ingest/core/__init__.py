"""
Video Ingest Service - Core Module

Configuration, logging setup and the error taxonomy shared by every layer.
"""

from .config import Config
from .errors import IngestError, BadRequest, Unauthorized, Forbidden, NotFound, ProbeFailure, RemuxFailure, UploadFailure

__all__ = ["Config", "IngestError", "BadRequest", "Unauthorized", "Forbidden", "NotFound", "ProbeFailure", "RemuxFailure", "UploadFailure"]
