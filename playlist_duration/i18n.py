# i18n.py
import locale

MESSAGES = {
    "en": {
        "usage": "Usage: playlist-duration <playlist_url>",
        "fetching": "Fetching: {playlist_id}",
        "total_duration": "Total duration: {duration}",
        "at_speed": "At {speed:.2f}x: {duration}",
        "error": "Error:",
        "invalid_url": "Invalid YouTube playlist URL.",
        "invalid_speed": "Invalid playback speed {speed}: must be a finite number greater than zero.",
        "playlist_fetch_error": "Error fetching playlist items: {error}",
        "help_app": "Compute the total duration of a YouTube playlist.",
        "help_url": "URL of the playlist, e.g. https://www.youtube.com/playlist?list=...",
        "help_env_file": "Path of the .env file holding YOUTUBE_API_KEY.",
        "help_speed": "Playback speed to project the total at. Can be used multiple times.",
        "help_lang": "Set the language for output messages (e.g., 'en' or 'fr').",
        "help_verbose": "Log progress information on stderr.",
    },
    "fr": {
        "usage": "Utilisation : playlist-duration <url_playlist>",
        "fetching": "Récupération : {playlist_id}",
        "total_duration": "Durée totale : {duration}",
        "at_speed": "À {speed:.2f}x : {duration}",
        "error": "Erreur :",
        "invalid_url": "URL de playlist YouTube invalide.",
        "invalid_speed": "Vitesse de lecture {speed} invalide : elle doit être un nombre fini supérieur à zéro.",
        "playlist_fetch_error": "Erreur lors de la récupération de la playlist : {error}",
        "help_app": "Calcule la durée totale d'une playlist YouTube.",
        "help_url": "URL de la playlist, ex. https://www.youtube.com/playlist?list=...",
        "help_env_file": "Chemin du fichier .env contenant YOUTUBE_API_KEY.",
        "help_speed": "Vitesse de lecture à projeter. Peut être utilisée plusieurs fois.",
        "help_lang": "Définit la langue des messages de sortie (ex: 'en' ou 'fr').",
        "help_verbose": "Affiche la progression sur stderr.",
    },
}

_current_lang = "en"


def get_default_lang():
    try:
        lang_code, _ = locale.getlocale()
        return "fr" if lang_code and lang_code.startswith("fr") else "en"
    except (ValueError, TypeError):
        return "en"


def set_lang(lang: str):
    global _current_lang
    _current_lang = lang if lang in MESSAGES else "en"


def get_message(key, **kwargs):
    lang = _current_lang
    if lang not in MESSAGES or key not in MESSAGES[lang]:
        # Fallback to English if key not found in current language
        lang = "en"

    message_template = MESSAGES[lang].get(key, f"Translation missing for key: {key}")

    try:
        return message_template.format(**kwargs)
    except KeyError as e:
        # This can happen if a placeholder is missing in kwargs
        return f"Formatting error for key '{key}': missing placeholder {e}"


# Initialize with default system language
set_lang(get_default_lang())
