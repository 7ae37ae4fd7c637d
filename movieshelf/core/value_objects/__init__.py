"""
Objets valeur immutables du domaine.

Exports :
- Viewport : drapeaux petit / moyen / grand écran
- classify_viewport : classification d'une largeur en points de rupture
"""

from movieshelf.core.value_objects.viewport import (
    MEDIUM_MAX_WIDTH,
    SMALL_MAX_WIDTH,
    Viewport,
    classify_viewport,
    parse_width,
)

__all__ = [
    "MEDIUM_MAX_WIDTH",
    "SMALL_MAX_WIDTH",
    "Viewport",
    "classify_viewport",
    "parse_width",
]
