import re

from pymonad.either import Either, Left, Right

from .errors import DurationDecodeError

_DURATION_RE = re.compile(r"PT(?:([0-9]+)H)?(?:([0-9]+)M)?(?:([0-9]+)S)?")


def _component(capture) -> int:
    # Unparseable captures count as zero.
    if not capture:
        return 0
    try:
        return int(capture)
    except ValueError:
        return 0


def parse_iso8601_duration(value: str) -> Either[DurationDecodeError, int]:
    """
    Decodes a YouTube duration string such as "PT1H2M3S" into seconds.

    Every component is optional, so "PT45M" is 2700 and "PT" is 0.
    Day, week, month and year components are not supported.

    Returns:
        Either: A Right(seconds) on success, or a Left(DurationDecodeError)
        when the string holds no "PT" marker.
    """
    match = _DURATION_RE.search(value or "")
    if not match:
        return Left(DurationDecodeError(f"Invalid duration: '{value}'"))

    hours, minutes, seconds = (_component(group) for group in match.groups())
    return Right(hours * 3600 + minutes * 60 + seconds)


def format_duration(seconds: float) -> str:
    """Renders a duration as "<H>h <M>m <S>s", truncating to whole seconds."""
    total = int(seconds)
    hours = total // 3600
    minutes = (total // 60) % 60
    secs = total % 60
    return f"{hours}h {minutes}m {secs}s"
