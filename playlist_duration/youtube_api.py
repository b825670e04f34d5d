import logging
from typing import List, Optional

from pymonad.either import Either, Left, Right
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from . import logger_config
from .domain.duration import parse_iso8601_duration
from .domain.errors import AppError, VideoNotFoundError, YouTubeApiError
from .domain.models import Config

logger = logging.getLogger(__name__)

PLAYLIST_PAGE_SIZE = 50


def build_service(config: Config):
    """Construit un client YouTube Data API v3 authentifié par la clé d'API."""
    logger.info("Building YouTube service with API key.")
    return build("youtube", "v3", developerKey=config.api_key, cache_discovery=False)


def _http_error_message(e: HttpError) -> str:
    content = e.content
    if isinstance(content, bytes):
        content = content.decode("utf-8", errors="replace")
    return f"HTTP {e.resp.status}: {content}"


def fetch_playlist_items(
    config: Config, playlist_id: str, youtube=None
) -> Either[YouTubeApiError, List[str]]:
    """
    Liste les IDs de toutes les vidéos d'une playlist, page par page.

    Args:
        config: La configuration de l'application.
        playlist_id: L'ID de la playlist.
        youtube: Un service déjà construit. Construit depuis `config` si None.

    Returns:
        Either: Un Right(video_ids) dans l'ordre de la playlist, ou un
        Left(YouTubeApiError) si une page échoue.
    """
    video_ids: List[str] = []
    page_token: Optional[str] = None
    page = 0

    try:
        if youtube is None:
            youtube = build_service(config)

        while True:
            page += 1
            logger.info(f"Requesting page {page} of playlist '{playlist_id}'.")
            response = youtube.playlistItems().list(
                part="contentDetails",
                playlistId=playlist_id,
                maxResults=PLAYLIST_PAGE_SIZE,
                pageToken=page_token,
            ).execute()

            for item in response.get("items", []):
                video_ids.append(item["contentDetails"]["videoId"])

            page_token = response.get("nextPageToken")
            if not page_token:
                break

        logger.info(f"Playlist '{playlist_id}' contains {len(video_ids)} videos.")
        return Right(video_ids)

    except HttpError as e:
        error_message = f"API error on page {page}: {_http_error_message(e)}"
        logger.error(f"Failed to list playlist '{playlist_id}': {error_message}")
        return Left(YouTubeApiError(error_message))
    except (KeyError, TypeError, AttributeError) as e:
        error_message = f"Malformed response on page {page}: {e!r}"
        logger.error(f"Failed to list playlist '{playlist_id}': {error_message}")
        return Left(YouTubeApiError(error_message))
    except Exception as e:
        logger.error(f"An unexpected error occurred while listing '{playlist_id}': {e}")
        return Left(YouTubeApiError(f"An unexpected error occurred: {e}"))


def fetch_video_duration(
    config: Config, video_id: str, youtube=None
) -> Either[AppError, int]:
    """
    Récupère la durée d'une vidéo, en secondes.

    Args:
        config: La configuration de l'application.
        video_id: L'ID de la vidéo.
        youtube: Un service déjà construit. Construit depuis `config` si None.

    Returns:
        Either: Un Right(secondes), un Left(VideoNotFoundError) si l'API ne
        renvoie aucune vidéo, un Left(DurationDecodeError) si la durée est
        illisible, ou un Left(YouTubeApiError) si la requête échoue.
    """
    try:
        if youtube is None:
            youtube = build_service(config)

        logger.info(f"Requesting details of video '{video_id}'.")
        response = youtube.videos().list(part="contentDetails", id=video_id).execute()

        items = response.get("items", [])
        if not items:
            return Left(VideoNotFoundError(f"No video details found for ID {video_id}"))

        duration = items[0]["contentDetails"]["duration"]

    except HttpError as e:
        return Left(YouTubeApiError(f"API error: {_http_error_message(e)}"))
    except (KeyError, TypeError, AttributeError) as e:
        return Left(YouTubeApiError(f"Malformed response: {e!r}"))
    except Exception as e:
        return Left(YouTubeApiError(f"An unexpected error occurred: {e}"))

    return parse_iso8601_duration(duration)


def connect(config: Config) -> Either[YouTubeApiError, object]:
    """Construit le service une seule fois pour le partager entre tous les appels."""
    try:
        return Right(build_service(config))
    except Exception as e:
        logger.error(f"Could not build YouTube service: {e}")
        return Left(YouTubeApiError(f"Could not build YouTube service: {e}"))
