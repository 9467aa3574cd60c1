"""
Video Repository Implementations.

In-memory record store used as the default binding and in tests. Real
deployments inject their own VideoRepository.
"""

import asyncio
import copy
import logging
from typing import Dict, Iterable, Optional

from ..domain.interfaces import VideoRepository
from ..domain.models import VideoRecord


class InMemoryVideoRepository(VideoRepository):
    """Dict-backed repository; returns copies so callers can't mutate stored rows"""

    def __init__(self, records: Optional[Iterable[VideoRecord]] = None):
        self.logger = logging.getLogger(__name__)
        self._records: Dict[str, VideoRecord] = {}
        self._lock = asyncio.Lock()

        for record in records or []:
            self._records[record.video_id] = copy.deepcopy(record)

    async def get_by_id(self, video_id: str) -> Optional[VideoRecord]:
        async with self._lock:
            record = self._records.get(video_id)
            return copy.deepcopy(record) if record else None

    async def update(self, record: VideoRecord) -> None:
        async with self._lock:
            if record.video_id not in self._records:
                raise KeyError(f"Video {record.video_id} does not exist")
            self._records[record.video_id] = copy.deepcopy(record)
            self.logger.debug(f"Updated video record {record.video_id}")
