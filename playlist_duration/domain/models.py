from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class Config:
    """Settings passed explicitly to every remote call."""
    api_key: str = field(repr=False)


@dataclass(frozen=True)
class PlaylistDuration:
    """Result of summing the durations of a playlist's videos."""
    total_seconds: int
    video_count: int
    skipped_video_ids: Tuple[str, ...] = ()

    @property
    def counted_videos(self) -> int:
        return self.video_count - len(self.skipped_video_ids)
