"""
Extraction des premiers paragraphes d'un message pour les emails de digest.
"""

from typing import Iterator, Optional, Union

from bs4 import BeautifulSoup
from bs4.element import Tag

from ..logger import get_logger
from .constants import (
    EXCERPT_TAGS,
    FALLBACK_TAGS,
    LIGHTBOX_CLASS,
    ONEBOX_CLASS,
    ONEBOX_TAG,
)
from .parsing import (
    document_root,
    has_class,
    has_text,
    is_empty,
    parse_fragment,
    top_level_tags,
)

logger = get_logger(__name__)

Excerpt = Union[str, Tag]


def _is_excerpt_candidate(tag: Tag) -> bool:
    if tag.name in EXCERPT_TAGS:
        return True
    return tag.name == ONEBOX_TAG and has_class(tag, ONEBOX_CLASS)


def _fallback_nodes(root: Union[BeautifulSoup, Tag]) -> Iterator[Tag]:
    """
    Génère, dans l'ordre du document, les nœuds acceptés comme extrait de secours.

    - <p> ou <div> de premier niveau non vide
    - <img> dans un <div class="lightbox-wrapper"> d'un <p> de premier niveau
    """
    for tag in top_level_tags(root):
        if tag.name in FALLBACK_TAGS and not is_empty(tag):
            yield tag
        if tag.name != "p":
            continue
        for wrapper in top_level_tags(tag):
            if wrapper.name == "div" and has_class(wrapper, LIGHTBOX_CLASS):
                yield from wrapper.find_all("img")


def first_paragraphs_from(html: str, min_length: int) -> Optional[Excerpt]:
    """
    Extrait le début d'un message jusqu'à atteindre `min_length` caractères.

    Parcourt les <p>, <ul>, <blockquote> et <aside class="onebox"> de premier
    niveau. Le HTML de chaque bloc contenant du texte est accumulé jusqu'à
    ce que la longueur cumulée du texte atteigne `min_length`.

    Quand aucun bloc ne contient de texte (message réduit à une image par
    exemple), le premier nœud de secours est renvoyé seul.

    Args:
        html: Contenu HTML du message
        min_length: Longueur de texte minimale souhaitée

    Returns:
        - Le HTML accumulé (str), éventuellement plus court que `min_length`
        - Sinon le nœud de secours (Tag)
        - None si rien ne convient

    Example:
        >>> first_paragraphs_from("<p>Hello world</p><p>Second</p>", 5)
        '<p>Hello world</p>'
    """
    soup = parse_fragment(html)
    root = document_root(soup)

    result = ""
    length = 0
    for node in top_level_tags(root):
        if not _is_excerpt_candidate(node) or not has_text(node):
            continue
        result += str(node)
        length += len(node.get_text())
        if length >= min_length:
            return result

    if result:
        return result

    node = next(_fallback_nodes(root), None)
    if node is None:
        logger.debug("No excerpt found in %d chars of HTML", len(html or ""))
    else:
        logger.debug("No text block found, using <%s> as excerpt", node.name)
    return node
