import pytest
from unittest.mock import MagicMock

from playlist_duration.config import API_KEY_VAR
from playlist_duration.domain.models import Config


@pytest.fixture
def api_config():
    return Config(api_key="test-api-key")


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Runs the test without YOUTUBE_API_KEY, from an empty directory."""
    # setenv first so the original value is restored afterwards, even if
    # load_dotenv sets the variable during the test.
    monkeypatch.setenv(API_KEY_VAR, "placeholder")
    monkeypatch.delenv(API_KEY_VAR)
    monkeypatch.chdir(tmp_path)
    return tmp_path


def playlist_page(video_ids, next_page_token=None):
    page = {"items": [{"contentDetails": {"videoId": vid}} for vid in video_ids]}
    if next_page_token:
        page["nextPageToken"] = next_page_token
    return page


def video_details(duration):
    return {"items": [{"contentDetails": {"duration": duration}}]}


@pytest.fixture
def youtube_service():
    """
    A YouTube service mock.

    Set `playlist_pages` to the list of pages returned by playlistItems.list,
    and `video_responses` to a dict of video ID -> videos.list response.
    """
    service = MagicMock()
    service.playlist_pages = []
    service.video_responses = {}

    service.playlistItems.return_value.list.return_value.execute.side_effect = (
        lambda: service.playlist_pages.pop(0)
    )

    def videos_list(part, id):
        request = MagicMock()
        request.execute.return_value = service.video_responses.get(id, {"items": []})
        return request

    service.videos.return_value.list.side_effect = videos_list
    return service
