import logging
import math
from typing import Callable, Iterable, List, Sequence

from pymonad.either import Either

from .domain.errors import AppError
from .domain.models import PlaylistDuration

logger = logging.getLogger(__name__)

DEFAULT_SPEEDS = (1.25, 1.5, 1.75, 2.0)


def is_valid_speed(speed: float) -> bool:
    """A playback speed must be a finite number greater than zero."""
    return math.isfinite(speed) and speed > 0


def sum_durations(
    video_ids: Sequence[str],
    fetch_duration: Callable[[str], Either[AppError, int]],
) -> PlaylistDuration:
    """
    Sums the durations of the given videos.

    A video whose duration cannot be fetched is logged and left out of the
    total; it never aborts the run.
    """
    total = 0
    skipped: List[str] = []

    for video_id in video_ids:
        result = fetch_duration(video_id)
        if result.is_right():
            total += result.value
        else:
            error, _ = result.monoid
            logger.error(f"Error fetching video duration for {video_id}: {error.message}")
            skipped.append(video_id)

    if skipped:
        logger.warning(f"{len(skipped)} of {len(video_ids)} videos left out of the total.")

    return PlaylistDuration(
        total_seconds=total,
        video_count=len(video_ids),
        skipped_video_ids=tuple(skipped),
    )


def project_duration(total_seconds: float, speed: float) -> int:
    """Duration of `total_seconds` played at `speed`, truncated to whole seconds."""
    if not is_valid_speed(speed):
        raise ValueError(f"speed must be a finite number greater than zero, got {speed}")
    return int(total_seconds / speed)


def project_speeds(total_seconds: float, speeds: Iterable[float] = DEFAULT_SPEEDS):
    """Yields (speed, projected_seconds) pairs in the order given."""
    for speed in speeds:
        yield speed, project_duration(total_seconds, speed)
