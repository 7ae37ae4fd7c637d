"""
Persistance SQLModel : engine, sessions, modèles et repositories.
"""
