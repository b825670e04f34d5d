from typing import Iterable, List

from .aggregator import DEFAULT_SPEEDS, project_speeds
from .domain.duration import format_duration
from .i18n import get_message

SEPARATOR = "_" * 57


def header_lines(playlist_id: str) -> List[str]:
    """Lines printed before the playlist is fetched."""
    return [SEPARATOR, "", get_message("fetching", playlist_id=playlist_id)]


def summary_lines(total_seconds: int, speeds: Iterable[float] = DEFAULT_SPEEDS) -> List[str]:
    """Total duration followed by one line per playback speed."""
    lines = ["", get_message("total_duration", duration=format_duration(total_seconds)), ""]
    for speed, seconds in project_speeds(total_seconds, speeds):
        lines.append(get_message("at_speed", speed=speed, duration=format_duration(seconds)))
    lines.append(SEPARATOR)
    return lines
