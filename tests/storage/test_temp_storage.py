"""
Scratch file allocation and cleanup.
"""

import base64
import logging
from pathlib import Path

import pytest

from video_ingest.core.config import Config
from video_ingest.storage.manager import TempStorageManager


def test_scratch_root_is_created(config: Config) -> None:
    manager = TempStorageManager(config)
    assert manager.scratch_root.is_dir()


def test_allocated_names_are_32_random_bytes_base64url(temp_storage: TempStorageManager) -> None:
    path = temp_storage.allocate("mp4")

    assert path.parent == temp_storage.scratch_root
    assert path.suffix == ".mp4"
    token = path.name[: -len(".mp4")]
    assert len(token) == 43
    assert "=" not in token and "+" not in token and "/" not in token
    assert len(base64.urlsafe_b64decode(token + "=")) == 32
    assert not path.exists()


def test_allocations_do_not_collide(temp_storage: TempStorageManager) -> None:
    paths = {temp_storage.allocate(".mp4") for _ in range(200)}
    assert len(paths) == 200


def test_release_all_removes_existing_and_skips_missing(temp_storage: TempStorageManager) -> None:
    first = temp_storage.allocate("mp4")
    second = temp_storage.allocate("mp4")
    first.write_bytes(b"a")
    second.write_bytes(b"b")
    missing = temp_storage.allocate("mp4")

    removed = temp_storage.release_all([first, missing, second])

    assert removed == 2
    assert not first.exists()
    assert not second.exists()


def test_release_all_keeps_going_after_a_failure(temp_storage: TempStorageManager, caplog: pytest.LogCaptureFixture) -> None:
    # A directory can't be unlinked; the file after it must still go
    stubborn = temp_storage.scratch_root / "stubborn.mp4"
    stubborn.mkdir()
    victim = temp_storage.allocate("mp4")
    victim.write_bytes(b"x")

    with caplog.at_level(logging.WARNING):
        removed = temp_storage.release_all([stubborn, victim])

    assert removed == 1
    assert not victim.exists()
    assert "Could not remove scratch file" in caplog.text


def test_session_releases_on_exception(temp_storage: TempStorageManager) -> None:
    with pytest.raises(RuntimeError, match="boom"):
        with temp_storage.session() as scratch:
            staged = scratch.allocate("mp4", purpose="staged upload")
            staged.write_bytes(b"data")
            derived = scratch.track(Path(f"{staged}.processed.mp4"), purpose="remux")
            derived.write_bytes(b"data")
            raise RuntimeError("boom")

    assert list(temp_storage.scratch_root.iterdir()) == []
    assert scratch.closed


def test_closed_session_refuses_new_files(temp_storage: TempStorageManager) -> None:
    with temp_storage.session() as scratch:
        pass

    with pytest.raises(RuntimeError):
        scratch.allocate("mp4", purpose="late")
