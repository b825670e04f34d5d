import logging
import sys


def setup_logger(level: int = logging.WARNING):
    """Configure le logger racine pour l'application."""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Créer un handler sur stderr : stdout est réservé au rapport
    handler = logging.StreamHandler(sys.stderr)

    # Créer un formateur et l'ajouter au handler
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    handler.setFormatter(formatter)

    # Ajouter le handler au logger (s'il n'en a pas déjà un)
    if not logger.handlers:
        logger.addHandler(handler)


# Appeler la configuration au moment de l'import
setup_logger()
