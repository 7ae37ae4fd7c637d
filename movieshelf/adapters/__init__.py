"""
Couche adaptateurs : clients du catalogue et interface en ligne de commande.
"""
