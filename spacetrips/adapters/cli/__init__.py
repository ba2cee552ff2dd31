"""
Interface ligne de commande (Typer).

Les commandes agissent au nom de l'utilisateur identifie par son token
(option --token ou variable SPACETRIPS_TOKEN).
"""

from spacetrips.adapters.cli.commands import book, cancel, launches, login, trips

__all__ = [
    "book",
    "cancel",
    "launches",
    "login",
    "trips",
]
