"""
Configuration management for the Video Ingest Service.

This module handles all configuration settings including scratch storage,
media tool paths, object storage credentials, token validation and system
parameters.
"""

import os
import json
import logging
from typing import Dict, List, Optional, Any
from dataclasses import dataclass, asdict, field
from pathlib import Path


MAX_UPLOAD_SIZE = 1 << 30  # 1 GiB


@dataclass
class StorageConfig:
    """Scratch storage and upload limits"""

    scratch_root: str = "./tmp/scratch"
    max_upload_size_bytes: int = MAX_UPLOAD_SIZE
    allowed_content_types: List[str] = field(default_factory=lambda: ["video/mp4"])


@dataclass
class MediaConfig:
    """External media tool locations"""

    ffprobe_path: str = "ffprobe"
    ffmpeg_path: str = "ffmpeg"


@dataclass
class S3Config:
    """Object storage configuration"""

    bucket: str = "video-ingest"
    region: str = "us-east-1"
    endpoint_url: Optional[str] = None  # MinIO and other S3-compatible stores
    access_key_id: Optional[str] = None
    secret_access_key: Optional[str] = None
    presign_ttl_seconds: int = 5 * 60


@dataclass
class AuthConfig:
    """Bearer token validation"""

    jwt_secret: str = ""
    jwt_issuer: Optional[str] = None


@dataclass
class SystemConfig:
    """System-wide configuration"""

    log_level: str = "INFO"
    log_file: Optional[str] = "video_ingest.log"
    api_host: str = "0.0.0.0"
    api_port: int = 8091


# (section, attribute, environment variable)
ENV_OVERRIDES = [
    ("auth", "jwt_secret", "VIDEO_INGEST_JWT_SECRET"),
    ("s3", "bucket", "VIDEO_INGEST_S3_BUCKET"),
    ("s3", "region", "VIDEO_INGEST_S3_REGION"),
    ("s3", "endpoint_url", "VIDEO_INGEST_S3_ENDPOINT_URL"),
    ("s3", "access_key_id", "AWS_ACCESS_KEY_ID"),
    ("s3", "secret_access_key", "AWS_SECRET_ACCESS_KEY"),
]


class Config:
    """Main configuration manager"""

    def __init__(self, config_file: Optional[str] = None, environ: Optional[Dict[str, str]] = None):
        self.config_file = config_file
        self.logger = logging.getLogger(__name__)

        # Default configurations
        self.storage = StorageConfig()
        self.media = MediaConfig()
        self.s3 = S3Config()
        self.auth = AuthConfig()
        self.system = SystemConfig()

        # Load configuration
        if self.config_file:
            self.load_config()

        self._apply_env_overrides(os.environ if environ is None else environ)

    def load_config(self) -> None:
        """Load configuration from file"""
        config_path = Path(self.config_file)

        if config_path.exists():
            try:
                with open(config_path, "r") as f:
                    config_data = json.load(f)
            except (OSError, ValueError) as e:
                self.logger.error(f"Error loading config from {config_path}: {e}")
                return

            if "storage" in config_data:
                self.storage = StorageConfig(**config_data["storage"])

            if "media" in config_data:
                self.media = MediaConfig(**config_data["media"])

            if "s3" in config_data:
                self.s3 = S3Config(**config_data["s3"])

            if "auth" in config_data:
                self.auth = AuthConfig(**config_data["auth"])

            if "system" in config_data:
                self.system = SystemConfig(**config_data["system"])

            self.logger.info(f"Configuration loaded from {config_path}")
        else:
            self.logger.info(f"Config file {config_path} not found, using defaults")
            self.save_config()  # Save default config

    def _apply_env_overrides(self, environ) -> None:
        """Let secrets and deployment-specific values come from the environment"""
        for section_name, attribute, variable in ENV_OVERRIDES:
            value = environ.get(variable)
            if value:
                setattr(getattr(self, section_name), attribute, value)

    def save_config(self) -> None:
        """Save current configuration to file"""
        config_data = self.to_dict()
        # Secrets never go to disk
        config_data["auth"]["jwt_secret"] = ""
        config_data["s3"]["access_key_id"] = None
        config_data["s3"]["secret_access_key"] = None

        try:
            with open(self.config_file, "w") as f:
                json.dump(config_data, f, indent=2)
            self.logger.info(f"Configuration saved to {self.config_file}")
        except OSError as e:
            self.logger.error(f"Error saving config to {self.config_file}: {e}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary"""
        return {"storage": asdict(self.storage), "media": asdict(self.media), "s3": asdict(self.s3), "auth": asdict(self.auth), "system": asdict(self.system)}
