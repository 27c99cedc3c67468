"""
Mise en forme du HTML pour les clients email.

Les clients email ne résolvent pas les URLs relatives et ignorent (ou
bloquent) les scripts. Le formateur par défaut rend donc toutes les URLs
absolues et retire les balises non affichables.
"""

from typing import Optional, Protocol

from bs4.element import Tag

from .htmlfragment.constants import IGNORED_TAGS
from .htmlfragment.parsing import parse_fragment
from .logger import get_logger
from .models import Post

logger = get_logger(__name__)

# Attributs portant une URL, par balise
URL_ATTRIBUTES = {"a": "href", "img": "src"}


class EmailFormatter(Protocol):
    """Service de réécriture du HTML avant envoi par email."""

    def format(self, html: str, post: Optional[Post] = None) -> str: ...


class AbsoluteUrlFormatter:
    """
    Formateur par défaut : URLs absolues, sans <script> ni <style>.

    Règles de réécriture :
        //cdn/x.png  -> https://cdn/x.png
        /t/topic/1   -> <base_url>/t/topic/1
        #reply-3     -> <url du message>#reply-3 (si un message est fourni)

    Example:
        >>> AbsoluteUrlFormatter("https://forum.test").format('<a href="/u/bob">bob</a>')
        '<a href="https://forum.test/u/bob">bob</a>'
    """

    def __init__(self, base_url: str, scheme: str = "https") -> None:
        self.base_url = base_url.rstrip("/")
        self.scheme = scheme

    def format(self, html: str, post: Optional[Post] = None) -> str:
        fragment = parse_fragment(html)

        for tag in fragment.find_all(list(IGNORED_TAGS)):
            tag.decompose()

        for tag in fragment.find_all(list(URL_ATTRIBUTES)):
            self._rewrite(tag, post)

        return str(fragment)

    def absolute(self, url: str) -> str:
        """Rend absolue une URL relative au site."""
        if url.startswith("//"):
            return f"{self.scheme}:{url}"
        if url.startswith("/"):
            return self.base_url + url
        return url

    def _rewrite(self, tag: Tag, post: Optional[Post]) -> None:
        attribute = URL_ATTRIBUTES[tag.name]
        url = tag.get(attribute)
        if not url:
            return

        if url.startswith("#"):
            if post is None:
                return
            rewritten = self.absolute(post.url.split("#", 1)[0]) + url
        else:
            rewritten = self.absolute(url)

        if rewritten != url:
            logger.debug("Rewrote <%s %s> %s -> %s", tag.name, attribute, url, rewritten)
            tag[attribute] = rewritten
