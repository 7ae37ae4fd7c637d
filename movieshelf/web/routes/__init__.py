"""
Routes de l'application web.

- home : page liste des films (pagination / défilement infini)
- movies : formulaires d'ajout et d'édition
- auth : pages de connexion et d'inscription
- api : API JSON (/api/movies, /api/logout)
"""
