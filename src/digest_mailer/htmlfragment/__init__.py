"""
Module pour parser et manipuler les fragments HTML des emails.

Organisation du module :
- constants.py : Backend de parsing et balises reconnues
- parsing.py : Parsing BeautifulSoup et parcours du premier niveau
- margin.py : Correction de la marge haute du premier paragraphe
- excerpt.py : Extraction des premiers paragraphes pour les digests
"""

from .constants import (
    HTML_PARSER,
    EXCERPT_TAGS,
    IGNORED_TAGS,
)
from .parsing import parse_fragment, top_level_tags
from .margin import correct_top_margin
from .excerpt import first_paragraphs_from

__all__ = [
    # Constantes
    "HTML_PARSER",
    "EXCERPT_TAGS",
    "IGNORED_TAGS",
    # Fonctions
    "parse_fragment",
    "top_level_tags",
    "correct_top_margin",
    "first_paragraphs_from",
]
