import typer
import logging
from pathlib import Path
from typing import List, Optional
from rich.console import Console
from rich.markup import escape
from toolz import pipe
from pymonad.either import Either, Left, Right

from . import logger_config
from .aggregator import DEFAULT_SPEEDS, is_valid_speed, sum_durations
from .config import load_config
from .domain.errors import AppError, InvalidPlaylistUrlError, YouTubeApiError
from .domain.models import Config, PlaylistDuration
from .domain.playlist import extract_playlist_id
from .i18n import get_default_lang, get_message, set_lang
from .report import header_lines, summary_lines
from .youtube_api import connect, fetch_playlist_items, fetch_video_duration

# Initialization
console = Console()
logger = logging.getLogger(__name__)

app = typer.Typer(
    name="playlist-duration",
    help=get_message("help_app"),
    add_completion=False,
)


# --- Helper Functions ---


def _handle_error(error: AppError) -> None:
    """Displays a formatted error message and exits the application."""
    console.print(f"[bold red]{get_message('error')}[/bold red] {escape(error.message)}")
    raise typer.Exit(code=1)


def _print_lines(lines: List[str]) -> None:
    for line in lines:
        console.print(line, highlight=False)


def _fetch_playlist_duration(
    config: Config, playlist_id: str
) -> Either[AppError, PlaylistDuration]:
    def list_videos(youtube) -> Either[AppError, PlaylistDuration]:
        return fetch_playlist_items(config, playlist_id, youtube).either(
            lambda err: Left(
                YouTubeApiError(get_message("playlist_fetch_error", error=err.message))
            ),
            lambda video_ids: Right(
                sum_durations(
                    video_ids,
                    lambda video_id: fetch_video_duration(config, video_id, youtube),
                )
            ),
        )

    return connect(config).bind(list_videos)


# --- CLI Command ---


@app.command()
def main(
    url: Optional[str] = typer.Argument(
        None, help=get_message("help_url"), show_default=False
    ),
    env_file: Optional[Path] = typer.Option(
        None,
        "--env-file",
        help=get_message("help_env_file"),
        dir_okay=False,
        show_default=False,
    ),
    speeds: Optional[List[float]] = typer.Option(
        None, "--speed", "-s", help=get_message("help_speed"), show_default=False
    ),
    lang: Optional[str] = typer.Option(
        None, "--lang", help=get_message("help_lang"), show_default=False
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help=get_message("help_verbose")),
):
    """Prints the total duration of a YouTube playlist at several playback speeds."""
    set_lang(lang or get_default_lang())
    if verbose:
        logger_config.setup_logger(logging.INFO)

    if not url:
        console.print(get_message("usage"))
        raise typer.Exit()

    speeds = tuple(speeds) if speeds else DEFAULT_SPEEDS
    for speed in speeds:
        if not is_valid_speed(speed):
            _handle_error(AppError(get_message("invalid_speed", speed=speed)))

    logger.info(f"Command initiated for URL: {url}")

    def fetch_flow(config: Config) -> Either[AppError, PlaylistDuration]:
        playlist_id = extract_playlist_id(url)
        if not playlist_id:
            logger.error(f"No playlist ID in URL: {url}")
            return Left(InvalidPlaylistUrlError(get_message("invalid_url")))

        _print_lines(header_lines(playlist_id))
        return _fetch_playlist_duration(config, playlist_id)

    def on_success(result: PlaylistDuration) -> None:
        logger.info(
            f"Counted {result.counted_videos} of {result.video_count} videos: "
            f"{result.total_seconds}s."
        )
        _print_lines(summary_lines(result.total_seconds, speeds))

    pipe(
        load_config(env_file),
        lambda e: e.bind(fetch_flow),
        lambda e: e.either(_handle_error, on_success),
    )


if __name__ == "__main__":
    app()
