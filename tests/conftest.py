"""
Shared fixtures and test doubles for the Video Ingest Service tests.
"""

import os
import stat
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import List, Optional, Tuple

import jwt
import pytest

from video_ingest.core.config import Config
from video_ingest.core.errors import RemuxFailure, UploadFailure
from video_ingest.storage.manager import TempStorageManager
from video_ingest.video.domain.interfaces import MediaInspector, MediaRemuxer, ObjectStore
from video_ingest.video.domain.models import AspectBucket, VideoRecord
from video_ingest.video.infrastructure.repositories import InMemoryVideoRepository

JWT_SECRET = "test-secret"
OWNER_ID = "user-owner"
OTHER_USER_ID = "user-other"
VIDEO_ID = "video-1"


class FakeMediaInspector(MediaInspector):
    def __init__(self, bucket: AspectBucket = AspectBucket.LANDSCAPE, error: Optional[BaseException] = None):
        self.bucket = bucket
        self.error = error
        self.inspected: List[Path] = []

    async def inspect(self, file_path: Path) -> AspectBucket:
        self.inspected.append(file_path)
        if self.error is not None:
            raise self.error
        return self.bucket


class FakeMediaRemuxer(MediaRemuxer):
    """Copies the input; fail=True writes a partial output then fails like ffmpeg would"""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.remuxed: List[Path] = []

    def output_path_for(self, input_path: Path) -> Path:
        return Path(f"{input_path}.processed.mp4")

    async def remux(self, input_path: Path) -> Path:
        output_path = self.output_path_for(input_path)
        self.remuxed.append(input_path)
        if self.fail:
            output_path.write_bytes(b"partial")
            raise RemuxFailure(detail="ffmpeg failed with exit code 1: moov atom not found")
        output_path.write_bytes(b"faststart:" + input_path.read_bytes())
        return output_path


class FakeObjectStore(ObjectStore):
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.uploads: List[Tuple[str, bytes, str]] = []

    async def upload(self, key: str, file_path: Path, content_type: str) -> None:
        if self.fail:
            raise UploadFailure(detail="AccessDenied")
        self.uploads.append((key, file_path.read_bytes(), content_type))

    def sign(self, key: str, ttl_seconds: int) -> str:
        return f"https://bucket.example/{key}?expires={ttl_seconds}"


def write_script(path: Path, body: str) -> Path:
    """Executable /bin/sh script standing in for ffprobe or ffmpeg"""
    path.write_text("#!/bin/sh\n" + body)
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


def make_token(user_id: str, secret: str = JWT_SECRET, expires_in: timedelta = timedelta(hours=1)) -> str:
    claims = {"sub": user_id, "exp": datetime.now(tz=timezone.utc) + expires_in}
    return jwt.encode(claims, secret, algorithm="HS256")


def scratch_contents(config: Config) -> List[str]:
    return sorted(os.listdir(config.storage.scratch_root))


@pytest.fixture
def config(tmp_path: Path) -> Config:
    cfg = Config(environ={})
    cfg.storage.scratch_root = str(tmp_path / "scratch")
    cfg.auth.jwt_secret = JWT_SECRET
    cfg.s3.bucket = "test-bucket"
    cfg.s3.access_key_id = "AKIDEXAMPLE"
    cfg.s3.secret_access_key = "wJalrXUtnFEMI/K7MDENG/bPxRfiCYEXAMPLEKEY"
    return cfg


@pytest.fixture
def temp_storage(config: Config) -> TempStorageManager:
    return TempStorageManager(config)


@pytest.fixture
def video_record() -> VideoRecord:
    return VideoRecord(video_id=VIDEO_ID, user_id=OWNER_ID, title="Boots", description="First upload")


@pytest.fixture
def repository(video_record: VideoRecord) -> InMemoryVideoRepository:
    return InMemoryVideoRepository([video_record])
