"""
Couche infrastructure.

Contient la persistance (SQLModel) des utilisateurs et des voyages reserves.
"""
