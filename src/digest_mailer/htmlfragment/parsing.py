"""
Parsing des fragments et documents HTML avec BeautifulSoup.
"""

from typing import Iterator, Union

from bs4 import BeautifulSoup
from bs4.element import Tag

from .constants import HTML_PARSER


def parse_fragment(html: str) -> BeautifulSoup:
    """
    Parse un fragment ou un document HTML.

    Aucune enveloppe html/body n'est ajoutée : voir document_root().
    """
    return BeautifulSoup(html or "", HTML_PARSER)


def document_root(soup: BeautifulSoup) -> Union[BeautifulSoup, Tag]:
    """
    Retourne le conteneur de premier niveau d'un document.

    Le backend html.parser n'ajoute pas de <body> : sans <body> explicite,
    la racine du soup joue ce rôle.
    """
    return soup.body or soup


def top_level_tags(root: Union[BeautifulSoup, Tag]) -> Iterator[Tag]:
    """Itère sur les balises enfants directs de `root`, dans l'ordre du document."""
    for child in root.children:
        if isinstance(child, Tag):
            yield child


def has_class(tag: Tag, class_name: str) -> bool:
    """Vérifie qu'une balise porte la classe CSS `class_name`."""
    return class_name in (tag.get("class") or [])


def has_text(tag: Tag) -> bool:
    """Vrai si la balise contient du texte autre que des espaces."""
    return bool(tag.get_text().strip())


def is_empty(tag: Tag) -> bool:
    """Équivalent du sélecteur CSS :empty (aucun nœud enfant)."""
    return not tag.contents
