import re

# No check is made on the ID itself beyond the allowed characters.
_PLAYLIST_ID_RE = re.compile(r"[?&]list=([a-zA-Z0-9_-]+)")


def extract_playlist_id(url: str) -> str:
    """Returns the `list` query parameter of a playlist URL, or "" if absent."""
    match = _PLAYLIST_ID_RE.search(url)
    if match:
        return match.group(1)
    return ""
