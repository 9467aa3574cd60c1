"""
Video API Routes.

FastAPI route definitions for video upload and retrieval.
"""

from typing import Optional

from fastapi import APIRouter, File, Request, UploadFile

from .controllers import VideoController
from .schemas import ErrorResponse, VideoResponse


ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    403: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def create_video_routes(video_controller: VideoController) -> APIRouter:
    """Create video API routes with dependency injection"""

    router = APIRouter(prefix="/api", tags=["videos"])

    @router.post("/video_upload/{video_id}", response_model=VideoResponse, responses=ERROR_RESPONSES)
    async def upload_video(video_id: str, request: Request, video: Optional[UploadFile] = File(None)):
        """
        Upload the video file for an existing video record.

        - **video_id**: Record to attach the video to; must belong to the caller
        - **video**: Multipart file field, `video/mp4`, at most 1 GiB

        The file is remuxed for fast start, stored under
        `{landscape|portrait|other}/{random}.mp4`, and the record is returned
        with a signed URL valid for a few minutes.
        """
        return await video_controller.upload_video(video_id, request.headers, video)

    @router.get("/videos/{video_id}", response_model=VideoResponse, responses=ERROR_RESPONSES)
    async def get_video(video_id: str, request: Request):
        """
        Get a video record with a freshly signed video URL.

        - **video_id**: Video record identifier
        """
        return await video_controller.get_video(video_id, request.headers)

    return router
