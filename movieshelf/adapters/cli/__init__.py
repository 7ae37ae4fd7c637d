"""
Interface en ligne de commande (typer + rich).
"""
