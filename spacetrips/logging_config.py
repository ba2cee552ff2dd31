"""
Configuration du logging de l'application via loguru.

- Sortie console : colorée, niveau configurable
- Sortie fichier : JSON, avec rotation et rétention
- Les loggers de la bibliothèque standard (uvicorn, httpx) sont redirigés
  vers loguru pour que `spacetrips serve` n'ait qu'un seul flux de logs
"""

import logging
import sys
from pathlib import Path

from loguru import logger

# Loggers tiers bavards en DEBUG (une ligne par requête HTTP sortante)
_NOISY_LOGGERS = ("httpx", "httpcore")


class InterceptHandler(logging.Handler):
    """Redirige un enregistrement logging standard vers loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Remonter jusqu'a l'appelant hors du module logging
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/spacetrips.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
    intercept_stdlib: bool = True,
) -> None:
    """Configure le logging de l'application.

    Args :
        log_level : Niveau minimum pour la console (DEBUG, INFO, WARNING, ERROR)
        log_file : Chemin du fichier de log JSON
        rotation_size : Taille avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs conservés
        intercept_stdlib : Redirige le module logging standard vers loguru
    """
    logger.remove()

    logger.add(
        sys.stderr,
        level=log_level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,  # Thread-safe (requêtes web concurrentes)
    )

    if intercept_stdlib:
        logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    logger.debug("Logging configuré", log_file=str(log_file), rotation=rotation_size)
