"""
Error taxonomy for the Video Ingest Service.

Every error carries the HTTP status it maps to and a message that is safe to
show the caller. Internal failures keep their diagnostic detail separately so
it can be logged without being returned verbatim.
"""

from typing import Optional


class IngestError(Exception):
    """Base class for errors raised by the ingestion service"""

    status_code = 500
    public_message = "Internal server error"

    def __init__(self, message: Optional[str] = None, detail: Optional[str] = None):
        self.message = message or self.public_message
        self.detail = detail
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message}: {self.detail}"
        return self.message

    @property
    def is_internal(self) -> bool:
        return self.status_code >= 500


class BadRequest(IngestError):
    status_code = 400
    public_message = "Bad request"


class Unauthorized(IngestError):
    status_code = 401
    public_message = "Couldn't validate credentials"


class Forbidden(IngestError):
    status_code = 403
    public_message = "You do not have permission to modify this video"


class NotFound(IngestError):
    status_code = 404
    public_message = "Couldn't find video"


class ProbeFailure(IngestError):
    """ffprobe could not report the geometry of a video stream"""

    public_message = "Couldn't inspect video"


class RemuxFailure(IngestError):
    """ffmpeg could not rewrite the container for fast start"""

    public_message = "Couldn't process video"


class UploadFailure(IngestError):
    """The object store rejected or never received the upload"""

    public_message = "Couldn't upload video"
