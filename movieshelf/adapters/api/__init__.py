"""
Implémentations du port IMovieCatalogClient.

- CatalogAPIClient : client HTTP (httpx) vers un serveur MovieShelf
- LocalCatalogSource : accès en processus au service du catalogue
"""

from movieshelf.adapters.api.catalog_client import CatalogAPIClient
from movieshelf.adapters.api.local_source import LocalCatalogSource

__all__ = [
    "CatalogAPIClient",
    "LocalCatalogSource",
]
