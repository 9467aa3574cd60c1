"""
Video Container Converters.

Rewrites MP4 containers for progressive playback using FFmpeg.
"""

import logging
import shutil
from pathlib import Path
from typing import List

from ...core.errors import RemuxFailure
from ..domain.interfaces import MediaRemuxer
from .process import run_process


PROCESSED_SUFFIX = ".processed.mp4"


class FFmpegFastStartRemuxer(MediaRemuxer):
    """Moves the moov atom to the front without re-encoding"""

    def __init__(self, ffmpeg_path: str = "ffmpeg"):
        self.ffmpeg_path = ffmpeg_path
        self.logger = logging.getLogger(__name__)

        if shutil.which(self.ffmpeg_path) is None:
            self.logger.error(f"FFmpeg not found at {self.ffmpeg_path!r} - uploads will fail until it is installed")

    def output_path_for(self, input_path: Path) -> Path:
        return Path(f"{input_path}{PROCESSED_SUFFIX}")

    async def remux(self, input_path: Path) -> Path:
        output_path = self.output_path_for(input_path)
        cmd = self._build_ffmpeg_command(input_path, output_path)

        self.logger.info(f"Remuxing {input_path.name} for fast start")

        try:
            result = await run_process(cmd)
        except FileNotFoundError as e:
            raise RemuxFailure(detail=f"ffmpeg executable not found: {e}") from e

        if result.returncode != 0:
            raise RemuxFailure(detail=f"ffmpeg failed with exit code {result.returncode}: {result.stderr_text}")

        self.logger.info(f"Wrote fast-start variant {output_path.name}")
        return output_path

    def _build_ffmpeg_command(self, input_path: Path, output_path: Path) -> List[str]:
        return [
            self.ffmpeg_path,
            "-i", str(input_path),
            "-movflags", "faststart",  # Index before media data
            "-map_metadata", "0",       # Keep source tags
            "-codec", "copy",           # No re-encode
            "-f", "mp4",
            str(output_path),
        ]
