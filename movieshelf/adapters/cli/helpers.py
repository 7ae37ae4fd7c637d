"""
Utilitaires partages pour les commandes CLI de MovieShelf.

Ce module fournit :
- console : instance Rich Console partagee
- async_command : decorateur transformant une fonction async en commande sync
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
"""

import asyncio
import inspect
from contextlib import contextmanager
from functools import wraps

from loguru import logger as loguru_logger
from rich.console import Console

console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("movieshelf")
    try:
        yield
    finally:
        loguru_logger.enable("movieshelf")


def async_command(func):
    """
    Transforme une fonction async en commande sync via asyncio.run().

    Preserve les annotations Typer pour que les options/arguments soient
    correctement interpretes.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        return asyncio.run(func(*args, **kwargs))
    wrapper.__signature__ = inspect.signature(func)
    wrapper.__annotations__ = func.__annotations__
    return wrapper
