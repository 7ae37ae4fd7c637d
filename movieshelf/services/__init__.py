"""
Couche application : cas d'utilisation du catalogue.

- catalog : lecture paginée, création et modification des films
- movie_list : état de la page liste (pagination / défilement infini)
"""
