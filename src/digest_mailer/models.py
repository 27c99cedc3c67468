"""
Objets métier minimaux lus par les helpers (auteur et message).
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """Auteur d'un message : identifiant et nom complet optionnel."""

    username: str
    name: Optional[str] = None


@dataclass
class Post:
    """
    Message cité dans un email de notification ou de digest.

    Attributes:
        url: URL du message (absolue ou relative à la base du site)
        user: Auteur du message
        cooked: Contenu HTML rendu du message
    """

    url: str
    user: User
    cooked: str = ""
