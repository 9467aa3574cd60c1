"""
Storage module for the Video Ingest Service.

This module handles scratch file allocation and cleanup for uploads in flight.
"""

from .manager import TempStorageManager, ScratchSession, ScratchFile

__all__ = ["TempStorageManager", "ScratchSession", "ScratchFile"]
