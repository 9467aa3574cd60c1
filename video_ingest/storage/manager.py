"""
Temp Storage Manager for the Video Ingest Service.

This module hands out unique scratch paths for in-flight uploads and makes
sure every scratch file it handed out is removed again, whatever happens to
the request that owned it.
"""

import logging
import secrets
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Union

from ..core.config import Config


@dataclass(frozen=True)
class ScratchFile:
    """A scratch path and what it holds"""

    path: Path
    purpose: str


class TempStorageManager:
    """Allocates and releases scratch files under a single root directory"""

    def __init__(self, config: Config):
        self.storage_config = config.storage
        self.scratch_root = Path(self.storage_config.scratch_root)
        self.logger = logging.getLogger(__name__)

        self._ensure_storage_structure()

    def _ensure_storage_structure(self) -> None:
        try:
            self.scratch_root.mkdir(parents=True, exist_ok=True)
            self.logger.debug(f"Ensured scratch directory: {self.scratch_root}")
        except OSError as e:
            self.logger.error(f"Error creating scratch directory {self.scratch_root}: {e}")
            raise

    def allocate(self, extension_hint: str) -> Path:
        """Return a fresh path named from 32 random bytes, base64url encoded"""
        extension = extension_hint.lstrip(".")
        name = secrets.token_urlsafe(32)
        if extension:
            name = f"{name}.{extension}"
        return self.scratch_root / name

    def release_all(self, paths: Iterable[Union[str, Path]]) -> int:
        """
        Delete every listed path that exists.

        A failure on one path is logged and does not stop the others.
        Returns the number of files removed.
        """
        removed = 0
        for path in paths:
            path = Path(path)
            try:
                if path.exists():
                    path.unlink()
                    removed += 1
                    self.logger.debug(f"Removed scratch file: {path}")
            except OSError as e:
                self.logger.warning(f"Could not remove scratch file {path}: {e}")
        return removed

    @contextmanager
    def session(self) -> Iterator["ScratchSession"]:
        """Scope in which every allocated or tracked file is released on exit"""
        scratch = ScratchSession(self)
        try:
            yield scratch
        finally:
            scratch.close()


class ScratchSession:
    """Scratch files owned by one request"""

    def __init__(self, manager: TempStorageManager):
        self.manager = manager
        self.files: List[ScratchFile] = []
        self.closed = False

    def allocate(self, extension_hint: str, purpose: str) -> Path:
        path = self.manager.allocate(extension_hint)
        return self.track(path, purpose)

    def track(self, path: Path, purpose: str) -> Path:
        """Register a path created by someone else (e.g. ffmpeg output)"""
        if self.closed:
            raise RuntimeError("Scratch session already closed")
        self.files.append(ScratchFile(path=Path(path), purpose=purpose))
        return Path(path)

    @property
    def paths(self) -> List[Path]:
        return [scratch_file.path for scratch_file in self.files]

    def close(self) -> int:
        if self.closed:
            return 0
        self.closed = True
        removed = self.manager.release_all(self.paths)
        self.manager.logger.debug(f"Released {removed} of {len(self.files)} scratch files")
        return removed
