"""Utilitaires partages (pagination par curseur)."""
