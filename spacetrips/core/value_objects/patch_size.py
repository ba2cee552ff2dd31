"""Taille des images de patch de mission."""

from enum import Enum


class PatchSize(str, Enum):
    """Variantes d'image exposees par le catalogue pour un patch de mission."""

    SMALL = "SMALL"
    LARGE = "LARGE"
