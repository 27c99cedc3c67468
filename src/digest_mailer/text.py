"""
Helpers texte : indentation pour les emails en texte brut et comparaison
des noms d'utilisateurs.
"""

import re

from .config import SiteSettings
from .models import Post

# Caractères ignorés lors de la comparaison de deux noms
_NAME_NOISE = re.compile(r"[ \t\r\n\f\v_-]")

# Une ligne se termine uniquement par "\n"
_LINE = re.compile(r"[^\n]*\n|[^\n]+")


def indent(text: str, by: int = 2) -> str:
    """
    Indente chaque ligne d'un texte de `by` espaces.

    Les fins de ligne sont conservées, le nombre de lignes ne change pas.
    Seul "\\n" sépare les lignes : "\\r" ou "\\f" restent dans la ligne.

    Example:
        >>> indent("a\\nb")
        '  a\\n  b'
    """
    spacer = " " * by
    return "".join(spacer + line for line in _LINE.findall(text))


def normalize_name(name: str) -> str:
    """
    Clé de comparaison d'un nom : minuscules, sans espaces, '_' ni '-'.

    Example:
        >>> normalize_name("My User-Name")
        'myusername'
    """
    return _NAME_NOISE.sub("", name.lower())


def _name_differs(post: Post) -> bool:
    user = post.user
    if not user.name or not user.name.strip():
        return False
    return normalize_name(user.name) != normalize_name(user.username)


def show_username_on_post(post: Post, settings: SiteSettings) -> bool:
    """
    Indique si l'identifiant de l'auteur doit apparaître à côté du message.

    L'identifiant est masqué seulement quand le nom complet est affiché
    et qu'il se confond avec l'identifiant.
    """
    if not settings.enable_names or not settings.display_name_on_posts:
        return True
    if not post.user.name or not post.user.name.strip():
        return True
    return _name_differs(post)


def show_name_on_post(post: Post, settings: SiteSettings) -> bool:
    """Indique si le nom complet de l'auteur doit apparaître sur le message."""
    return (
        settings.enable_names
        and settings.display_name_on_posts
        and _name_differs(post)
    )
