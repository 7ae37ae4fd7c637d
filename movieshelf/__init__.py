"""
MovieShelf - Catalogue de films personnel.

Ce package fournit une application web authentifiee pour consulter,
ajouter et modifier des films avec leur affiche.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, objets valeur)
- services/ : Couche application (catalogue, état de la page liste)
- adapters/ : Clients HTTP et CLI
- infrastructure/ : Persistance SQLModel
- web/ : Application FastAPI (routes, garde d'authentification, templates)
"""
