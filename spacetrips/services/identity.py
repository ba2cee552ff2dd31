"""
Resolution de l'identite a partir du credential de la requete.

Le token est l'encodage base64 de l'email de l'utilisateur. Ce schema
n'est PAS cryptographique : il ne fait que transporter l'email et ne
prouve rien sur l'appelant.

Responsabilites:
- Encoder un email en token (login)
- Decoder un token en email valide, ou lever InvalidCredentialError
- Resoudre un credential en utilisateur (find-or-create), ou anonyme
"""

import base64
import binascii
from typing import Optional

from email_validator import EmailNotValidError, validate_email
from loguru import logger

from spacetrips.core.entities.reservation import User
from spacetrips.services.reservation_store import ReservationStore


class InvalidCredentialError(ValueError):
    """Credential qui ne se decode pas en un email syntaxiquement valide."""


def normalize_email(email: str) -> Optional[str]:
    """
    Valide la syntaxe d'un email et retourne sa forme normalisee.

    La forme "Nom <adresse>" est refusee : l'email sert de cle d'unicite.
    Aucune verification de delivrabilite (pas de requete DNS).

    Returns:
        L'adresse normalisee (domaine en minuscules), ou None si invalide
    """
    try:
        return validate_email(email, check_deliverability=False).normalized
    except EmailNotValidError:
        return None


def encode_token(email: str) -> str:
    """
    Encode un email en token opaque.

    Args:
        email: Email de l'utilisateur

    Returns:
        Encodage base64 de l'email (ex: "a@a.a" -> "YUBhLmE=")
    """
    return base64.b64encode(email.encode("utf-8")).decode("ascii")


def decode_token(token: str) -> str:
    """
    Decode un token en email normalise.

    Le padding "=" final est optionnel.

    Raises:
        InvalidCredentialError: Token non base64, non UTF-8, ou email invalide
    """
    token = token.strip()
    token += "=" * (-len(token) % 4)
    try:
        decoded = base64.b64decode(token, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError, ValueError) as e:
        raise InvalidCredentialError("Credential illisible") from e

    email = normalize_email(decoded)
    if email is None:
        raise InvalidCredentialError("Le credential ne contient pas d'email valide")
    return email


class IdentityResolver:
    """
    Derive l'utilisateur courant du credential de la requete.

    Un credential absent ou invalide donne une identite anonyme (None),
    jamais une erreur. L'indisponibilite du stockage, elle, est propagee.
    """

    def __init__(self, store: ReservationStore) -> None:
        self._store = store

    def resolve(self, credential: Optional[str]) -> Optional[User]:
        """
        Resout un credential en utilisateur.

        Args:
            credential: Valeur du header Authorization (peut etre vide)

        Returns:
            L'utilisateur (cree au premier contact), ou None si anonyme

        Raises:
            StoreUnavailableError: Si le stockage ne repond pas
        """
        if not credential:
            return None

        try:
            email = decode_token(credential)
        except InvalidCredentialError as e:
            logger.debug(f"Credential ignore: {e}")
            return None

        return self._store.find_or_create_user(email).user

    def login(self, email: str) -> Optional[str]:
        """
        Connecte un utilisateur par son email.

        Le token encode l'adresse normalisee : deux graphies du meme
        domaine donnent le meme utilisateur.

        Returns:
            Le token de l'utilisateur, ou None si l'email est invalide
        """
        email = normalize_email(email) if email else None
        if email is None:
            return None

        lookup = self._store.find_or_create_user(email)
        if lookup.created:
            logger.info(f"Premier login de {email}")
        return encode_token(email)
