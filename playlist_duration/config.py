import os
import logging
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pymonad.either import Either, Left, Right

from .domain.errors import ConfigurationError
from .domain.models import Config

logger = logging.getLogger(__name__)

API_KEY_VAR = "YOUTUBE_API_KEY"


def load_config(env_file: Optional[Path] = None) -> Either[ConfigurationError, Config]:
    """
    Loads the dotenv file and builds the configuration.

    Variables already present in the environment win over the dotenv file.

    Args:
        env_file: Explicit dotenv file. When None, a `.env` file is looked up
            from the current working directory.

    Returns:
        Either: A Right(Config) on success, or a Left(ConfigurationError).
    """
    if env_file is not None:
        if not env_file.is_file():
            logger.error(f"Env file '{env_file}' not found.")
            return Left(ConfigurationError(f"Env file '{env_file}' not found."))
        dotenv_path = str(env_file)
    else:
        dotenv_path = find_dotenv(usecwd=True)

    if dotenv_path:
        logger.info(f"Loading environment from '{dotenv_path}'.")
        load_dotenv(dotenv_path, override=False)
    else:
        logger.warning("No .env file found, using the process environment only.")

    api_key = os.environ.get(API_KEY_VAR, "").strip()
    if not api_key:
        logger.error(f"{API_KEY_VAR} is not set.")
        return Left(
            ConfigurationError(f"{API_KEY_VAR} not set in the environment or .env file.")
        )

    logger.info("Configuration loaded.")
    return Right(Config(api_key=api_key))
