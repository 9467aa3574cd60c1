"""
Signing records on read and bearer token handling.
"""

import asyncio

import pytest

from conftest import JWT_SECRET, OWNER_ID, VIDEO_ID, FakeObjectStore, make_token
from video_ingest.core.config import AuthConfig
from video_ingest.core.errors import NotFound, Unauthorized
from video_ingest.video.application.video_service import VideoService
from video_ingest.video.domain.models import VideoRecord
from video_ingest.video.infrastructure.auth import JWTTokenValidator, get_bearer_token


def test_record_without_key_is_returned_unchanged(video_record: VideoRecord) -> None:
    service = VideoService(video_repository=None, object_store=FakeObjectStore())

    assert service.sign_record(video_record) is video_record


def test_signing_does_not_touch_stored_record(repository) -> None:
    record = asyncio.run(repository.get_by_id(VIDEO_ID))
    record.video_url = "portrait/abc.mp4"
    asyncio.run(repository.update(record))
    service = VideoService(repository, FakeObjectStore(), presign_ttl_seconds=120)

    signed = asyncio.run(service.get_signed_video(VIDEO_ID))

    assert signed.video_url == "https://bucket.example/portrait/abc.mp4?expires=120"
    assert asyncio.run(repository.get_by_id(VIDEO_ID)).video_url == "portrait/abc.mp4"


def test_unknown_video_is_not_found(repository) -> None:
    service = VideoService(repository, FakeObjectStore())

    with pytest.raises(NotFound):
        asyncio.run(service.get_signed_video("missing"))


def test_bearer_token_extraction() -> None:
    assert get_bearer_token({"authorization": "Bearer abc.def.ghi"}) == "abc.def.ghi"

    with pytest.raises(Unauthorized):
        get_bearer_token({})
    with pytest.raises(Unauthorized):
        get_bearer_token({"authorization": "Bearer "})


def test_jwt_subject_is_user_id() -> None:
    validator = JWTTokenValidator(AuthConfig(jwt_secret=JWT_SECRET))
    assert validator.validate(make_token(OWNER_ID)) == OWNER_ID


def test_issuer_is_checked_when_configured() -> None:
    validator = JWTTokenValidator(AuthConfig(jwt_secret=JWT_SECRET, jwt_issuer="video-ingest"))

    with pytest.raises(Unauthorized):
        validator.validate(make_token(OWNER_ID))


def test_empty_secret_rejects_everything() -> None:
    validator = JWTTokenValidator(AuthConfig(jwt_secret=""))

    with pytest.raises(Unauthorized):
        validator.validate(make_token(OWNER_ID, secret=""))
