"""
SpaceTrips - Catalogue de lancements et reservation de places.

Ce package expose le catalogue des lancements SpaceX (pagine par curseur)
et permet aux utilisateurs authentifies de reserver des places sur un ou
plusieurs lancements.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, objets valeur)
- services/ : Couche application (identite, reservations, orchestration)
- adapters/ : Clients des systèmes externes (API SpaceX)
- infrastructure/ : Persistance SQLModel (utilisateurs, voyages)
- web/ : Surface HTTP (FastAPI)
"""
