from dataclasses import dataclass


@dataclass(frozen=True)
class AppError:
    """Classe de base pour les erreurs de l'application."""
    message: str


@dataclass(frozen=True)
class ConfigurationError(AppError):
    """Configuration absente ou illisible (clé d'API, fichier .env)."""
    pass


@dataclass(frozen=True)
class InvalidPlaylistUrlError(AppError):
    """L'URL ne contient pas de paramètre `list`."""
    pass


@dataclass(frozen=True)
class YouTubeApiError(AppError):
    """Erreur lors de l'interaction avec l'API YouTube."""
    pass


@dataclass(frozen=True)
class VideoNotFoundError(YouTubeApiError):
    """L'API n'a renvoyé aucune vidéo pour l'ID demandé."""
    pass


@dataclass(frozen=True)
class DurationDecodeError(AppError):
    """Une durée n'a pas pu être décodée."""
    pass
