"""
Classification de la largeur d'affichage en points de rupture.

Les seuils reprennent les media queries de l'interface :
- petit écran : (max-width: 768px)
- écran moyen : (min-width: 769px) and (max-width: 1024px)
- grand écran : (min-width: 1025px)
"""

import math
from dataclasses import dataclass
from typing import Optional

SMALL_MAX_WIDTH = 768
MEDIUM_MAX_WIDTH = 1024


@dataclass(frozen=True)
class Viewport:
    """Les trois drapeaux de taille d'écran (au plus un seul est vrai)."""

    is_small_device: bool = False
    is_medium_device: bool = False
    is_large_device: bool = False

    @property
    def label(self) -> str:
        """Nom court de la classe d'écran ("small", "medium", "large" ou "unknown")."""
        if self.is_small_device:
            return "small"
        if self.is_medium_device:
            return "medium"
        if self.is_large_device:
            return "large"
        return "unknown"


def classify_viewport(width: Optional[int]) -> Viewport:
    """
    Classe une largeur en pixels CSS.

    Une largeur inconnue (None ou négative) donne trois drapeaux à False,
    ce qui correspond à l'état avant la première évaluation côté navigateur.

    Args:
        width: Largeur de la fenêtre en pixels CSS

    Returns:
        Viewport avec les drapeaux correspondants
    """
    if width is None or width < 0:
        return Viewport()
    return Viewport(
        is_small_device=width <= SMALL_MAX_WIDTH,
        is_medium_device=SMALL_MAX_WIDTH < width <= MEDIUM_MAX_WIDTH,
        is_large_device=width > MEDIUM_MAX_WIDTH,
    )


def parse_width(raw: Optional[str]) -> Optional[int]:
    """
    Convertit une valeur de cookie ou d'en-tête en largeur entière.

    Toute valeur illisible ou non finie (inf, nan, 1e999) donne None.
    """
    if not raw:
        return None
    try:
        width = float(raw.strip())
    except (ValueError, TypeError):
        return None
    if not math.isfinite(width):
        return None
    return int(width)
