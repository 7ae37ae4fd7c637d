"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe MOVIESHELF_,
et peut optionnellement être fournie via un fichier .env.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de movieshelf/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe MOVIESHELF_.
    Exemple : MOVIESHELF_PAGE_SIZE=12
    """

    model_config = SettingsConfigDict(
        env_prefix="MOVIESHELF_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Base de données
    database_url: str = Field(default="sqlite:///movieshelf.db")

    # Pagination de la liste de films
    page_size: int = Field(default=8, ge=1)
    max_page_size: int = Field(default=100, ge=1)

    # Authentification (présence du cookie uniquement)
    session_cookie: str = Field(default="token")
    auth_base_url: str = Field(default="/api/auth")

    # Client HTTP (commandes CLI browse / logout)
    api_base_url: str = Field(default="http://localhost:8000")
    api_timeout: float = Field(default=10.0, gt=0)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/movieshelf.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("api_base_url", "auth_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Supprime le slash final pour composer les URLs sans doublon."""
        return v.rstrip("/") or "/"
