"""
Journalisation de MovieShelf via loguru.

Deux sorties, partagées par la CLI et le serveur web :
- stderr : format lisible et coloré, au niveau MOVIESHELF_LOG_LEVEL
- fichier : une ligne JSON par enregistrement, rotation et rétention
  pilotées par les paramètres log_rotation_size / log_retention_count

Chaque enregistrement porte extra.component ("cli" ou "web"). Les loggers
standard d'uvicorn sont redirigés vers loguru pour que les accès HTTP
arrivent dans le même fichier.
"""

import logging
import sys

from loguru import logger

from .config import Settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<magenta>{extra[component]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


class _InterceptHandler(logging.Handler):
    """Transmet les enregistrements du module logging à loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        logger.opt(exception=record.exc_info).bind(stdlib_logger=record.name).log(
            level, record.getMessage()
        )


def _intercept_uvicorn() -> None:
    handler = _InterceptHandler()
    for name in UVICORN_LOGGERS:
        std_logger = logging.getLogger(name)
        std_logger.handlers = [handler]
        std_logger.propagate = False


def configure_logging(settings: Settings, component: str = "cli", enqueue: bool = True) -> None:
    """
    Installe les sorties loguru décrites par les paramètres.

    Peut être rappelée : les sorties précédentes sont retirées.

    Args:
        settings: Paramètres de l'application (niveau, fichier, rotation)
        component: Valeur de extra.component ("cli" ou "web")
        enqueue: Écriture fichier via une file (sûr entre threads et processus)
    """
    logger.remove()
    logger.configure(extra={"component": component})

    logger.add(sys.stderr, level=settings.log_level, format=CONSOLE_FORMAT, colorize=True)

    settings.log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        settings.log_file,
        level="DEBUG",
        serialize=True,
        rotation=settings.log_rotation_size,
        retention=settings.log_retention_count,
        compression="zip",
        enqueue=enqueue,
    )

    if component == "web":
        _intercept_uvicorn()

    logger.debug("Journalisation configuree", log_file=str(settings.log_file))
