"""
Couche adaptateurs (infrastructure).

Les adaptateurs implémentent les ports définis dans core/ports/ et fournissent
des implémentations concrètes pour les systèmes externes.

Sous-packages :
- api/ : Client de l'API SpaceX (catalogue des lancements)
- cli/ : Commandes Typer (catalogue, login, reservations)

Chaque adaptateur dépend de core/ mais core/ ne dépend jamais des adaptateurs.
"""
