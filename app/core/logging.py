import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure le logger racine (une seule fois, au démarrage de l'app)."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
