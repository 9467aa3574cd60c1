"""
Video Metadata Extractors.

ffprobe-based implementation of the media inspector.
"""

import json
import logging
import shutil
from pathlib import Path
from typing import List

from ...core.errors import ProbeFailure
from ..domain.interfaces import MediaInspector
from ..domain.models import AspectBucket, VideoGeometry
from .process import run_process


class FFprobeMediaInspector(MediaInspector):
    """Reads width/height of the first video stream with ffprobe"""

    def __init__(self, ffprobe_path: str = "ffprobe"):
        self.ffprobe_path = ffprobe_path
        self.logger = logging.getLogger(__name__)

        if shutil.which(self.ffprobe_path) is None:
            self.logger.error(f"ffprobe not found at {self.ffprobe_path!r} - uploads will fail until it is installed")

    async def inspect(self, file_path: Path) -> AspectBucket:
        geometry = await self.extract_geometry(file_path)
        bucket = geometry.aspect_bucket
        self.logger.info(f"{file_path.name}: {geometry.width}x{geometry.height} -> {bucket.value}")
        return bucket

    async def extract_geometry(self, file_path: Path) -> VideoGeometry:
        cmd = self._build_ffprobe_command(file_path)

        try:
            result = await run_process(cmd)
        except FileNotFoundError as e:
            raise ProbeFailure(detail=f"ffprobe executable not found: {e}") from e

        if result.returncode != 0:
            raise ProbeFailure(detail=f"ffprobe failed with exit code {result.returncode}: {result.stderr_text}")

        return self._parse_geometry(result.stdout)

    def _parse_geometry(self, output: bytes) -> VideoGeometry:
        try:
            data = json.loads(output)
        except ValueError as e:
            raise ProbeFailure(detail=f"Unparsable ffprobe output: {e}") from e

        streams = data.get("streams") or []
        if not streams:
            raise ProbeFailure(detail="No video stream found")

        try:
            width = int(streams[0]["width"])
            height = int(streams[0]["height"])
        except (KeyError, TypeError, ValueError) as e:
            raise ProbeFailure(detail=f"Video stream has no usable dimensions: {streams[0]}") from e

        if width <= 0 or height <= 0:
            raise ProbeFailure(detail=f"Invalid video dimensions {width}x{height}")

        return VideoGeometry(width=width, height=height)

    def _build_ffprobe_command(self, file_path: Path) -> List[str]:
        return [
            self.ffprobe_path,
            "-v", "error",
            "-select_streams", "v:0",
            "-show_entries", "stream=width,height",
            "-of", "json",
            "-show_streams",
            str(file_path),
        ]
