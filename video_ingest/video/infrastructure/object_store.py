"""
Object Storage.

S3 implementation of the object store: uploads finished videos and presigns
GET URLs for them.
"""

import asyncio
import functools
import logging
from pathlib import Path
from typing import Any, Optional

import boto3
from boto3.exceptions import S3UploadFailedError
from botocore.config import Config as BotoConfig
from botocore.exceptions import BotoCoreError, ClientError

from ...core.config import S3Config
from ...core.errors import UploadFailure
from ..domain.interfaces import ObjectStore


class S3ObjectStore(ObjectStore):
    """S3 (or S3-compatible) bucket"""

    def __init__(self, s3_config: S3Config, client: Optional[Any] = None):
        self.s3_config = s3_config
        self.bucket = s3_config.bucket
        self.logger = logging.getLogger(__name__)
        self.client = client or self._create_client()

    def _create_client(self):
        # SigV4 so presigned URLs carry X-Amz-Date / X-Amz-Expires.
        # One attempt per request; a failed upload goes back to the caller as is.
        return boto3.client(
            "s3",
            region_name=self.s3_config.region,
            endpoint_url=self.s3_config.endpoint_url,
            aws_access_key_id=self.s3_config.access_key_id,
            aws_secret_access_key=self.s3_config.secret_access_key,
            config=BotoConfig(
                signature_version="s3v4",
                retries={"max_attempts": 1, "mode": "standard"},
            ),
        )

    async def upload(self, key: str, file_path: Path, content_type: str) -> None:
        """Upload file_path to s3://bucket/key; not retried here"""
        upload_call = functools.partial(
            self.client.upload_file,
            str(file_path),
            self.bucket,
            key,
            ExtraArgs={"ContentType": content_type},
        )

        try:
            # boto3 blocks, keep it off the event loop
            await asyncio.get_running_loop().run_in_executor(None, upload_call)
        except (BotoCoreError, ClientError, S3UploadFailedError) as e:
            raise UploadFailure(detail=f"s3://{self.bucket}/{key}: {e}") from e

        self.logger.info(f"Uploaded video to s3://{self.bucket}/{key}")

    def sign(self, key: str, ttl_seconds: int) -> str:
        """Presigned GET URL valid for ttl_seconds; computed locally"""
        return self.client.generate_presigned_url(
            "get_object",
            Params={"Bucket": self.bucket, "Key": key},
            ExpiresIn=ttl_seconds,
        )
