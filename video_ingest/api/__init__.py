"""
API module for the Video Ingest Service.

This module provides the FastAPI application that fronts the ingestion pipeline.
"""

from .server import APIServer

__all__ = ["APIServer"]
