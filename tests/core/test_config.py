"""
Configuration loading, defaults and environment overrides.
"""

import json
from pathlib import Path

from video_ingest.core.config import Config


def test_defaults_without_file() -> None:
    config = Config(environ={})

    assert config.storage.max_upload_size_bytes == 1 << 30
    assert config.storage.allowed_content_types == ["video/mp4"]
    assert config.s3.presign_ttl_seconds == 300
    assert config.media.ffprobe_path == "ffprobe"
    assert config.media.ffmpeg_path == "ffmpeg"


def test_missing_file_is_written_with_defaults_but_no_secrets(tmp_path: Path) -> None:
    config_file = tmp_path / "config.json"

    Config(str(config_file), environ={"VIDEO_INGEST_JWT_SECRET": "s3cret", "AWS_SECRET_ACCESS_KEY": "key"})

    saved = json.loads(config_file.read_text())
    assert saved["storage"]["max_upload_size_bytes"] == 1 << 30
    assert saved["auth"]["jwt_secret"] == ""
    assert saved["s3"]["secret_access_key"] is None


def test_sections_load_from_file(tmp_path: Path) -> None:
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({
        "storage": {"scratch_root": "/var/tmp/ingest", "max_upload_size_bytes": 1024},
        "s3": {"bucket": "videos", "region": "eu-west-1", "presign_ttl_seconds": 60},
        "media": {"ffmpeg_path": "/opt/ffmpeg/bin/ffmpeg"},
    }))

    config = Config(str(config_file), environ={})

    assert config.storage.scratch_root == "/var/tmp/ingest"
    assert config.storage.max_upload_size_bytes == 1024
    assert config.storage.allowed_content_types == ["video/mp4"]
    assert config.s3.bucket == "videos"
    assert config.s3.region == "eu-west-1"
    assert config.s3.presign_ttl_seconds == 60
    assert config.media.ffmpeg_path == "/opt/ffmpeg/bin/ffmpeg"
    assert config.media.ffprobe_path == "ffprobe"


def test_environment_overrides_file(tmp_path: Path) -> None:
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({"s3": {"bucket": "from-file"}}))

    config = Config(str(config_file), environ={
        "VIDEO_INGEST_S3_BUCKET": "from-env",
        "VIDEO_INGEST_JWT_SECRET": "s3cret",
        "AWS_ACCESS_KEY_ID": "AKID",
    })

    assert config.s3.bucket == "from-env"
    assert config.auth.jwt_secret == "s3cret"
    assert config.s3.access_key_id == "AKID"


def test_configs_are_independent() -> None:
    first = Config(environ={})
    second = Config(environ={})

    first.storage.allowed_content_types.append("video/webm")

    assert second.storage.allowed_content_types == ["video/mp4"]
