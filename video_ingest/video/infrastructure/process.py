"""
External process helper shared by the ffprobe and ffmpeg implementations.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import List

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProcessResult:
    returncode: int
    stdout: bytes
    stderr: bytes

    @property
    def stderr_text(self) -> str:
        return self.stderr.decode(errors="replace").strip()


async def run_process(cmd: List[str]) -> ProcessResult:
    """
    Run cmd to completion, capturing stdout and stderr in full.

    No timeout is applied. Raises FileNotFoundError when the executable is
    not installed.
    """
    logger.debug(f"Running: {' '.join(cmd)}")

    process = await asyncio.create_subprocess_exec(
        *cmd,
        stdin=asyncio.subprocess.DEVNULL,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE
    )

    try:
        stdout, stderr = await process.communicate()
    except asyncio.CancelledError:
        # Don't leave the child running when the request goes away
        if process.returncode is None:
            try:
                process.kill()
            except ProcessLookupError:
                # Exited on its own after the returncode check
                pass
            await process.wait()
        raise

    return ProcessResult(returncode=process.returncode, stdout=stdout, stderr=stderr)
