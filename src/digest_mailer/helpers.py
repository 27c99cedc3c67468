"""
Helpers de vue des emails de notification et de digest.

`NotificationHelpers` regroupe tous les helpers autour d'un contexte de rendu
explicite : réglages du site, formateur email et nom du site. C'est l'objet
exposé aux templates Jinja2 (voir templating.py).
"""

from typing import Optional

from markupsafe import Markup

from . import site, text
from .config import SiteSettings
from .formatting import AbsoluteUrlFormatter, EmailFormatter
from .htmlfragment import correct_top_margin, first_paragraphs_from
from .htmlfragment.excerpt import Excerpt
from .logger import get_logger
from .models import Post

logger = get_logger(__name__)


def email_excerpt(
    html: str,
    formatter: EmailFormatter,
    min_length: int,
    post: Optional[Post] = None,
) -> Markup:
    """
    Extrait de message prêt à être inséré dans un email.

    Les premiers paragraphes (ou, à défaut, le HTML complet) passent par le
    formateur email. Le résultat est marqué comme sûr.
    """
    excerpt = first_paragraphs_from(html, min_length)
    source = str(excerpt) if excerpt is not None else (html or "")
    return Markup(formatter.format(source, post))


class NotificationHelpers:
    """
    Contexte de rendu des emails.

    Attributes:
        settings: Réglages du site
        formatter: Service de mise en forme email
        site_name: Nom du site affiché dans les liens (défaut: settings.title)

    Example:
        >>> helpers = NotificationHelpers(SiteSettings(title="Forum", base_url="https://f.test"))
        >>> helpers.html_site_link()
        Markup("<a href='https://f.test'>Forum</a>")
    """

    def __init__(
        self,
        settings: SiteSettings,
        formatter: Optional[EmailFormatter] = None,
        site_name: Optional[str] = None,
    ) -> None:
        self.settings = settings
        self.formatter = formatter or AbsoluteUrlFormatter(settings.base_url)
        self.site_name = settings.title if site_name is None else site_name

    # -----------------------------------
    # Texte
    # -----------------------------------

    def indent(self, text_block: str, by: int = 2) -> str:
        return text.indent(text_block, by)

    def normalize_name(self, name: str) -> str:
        return text.normalize_name(name)

    def show_username_on_post(self, post: Post) -> bool:
        return text.show_username_on_post(post, self.settings)

    def show_name_on_post(self, post: Post) -> bool:
        return text.show_name_on_post(post, self.settings)

    # -----------------------------------
    # HTML
    # -----------------------------------

    def correct_top_margin(self, html: str, desired: str) -> Markup:
        return correct_top_margin(html, desired)

    def first_paragraphs_from(self, html: str) -> Optional[Excerpt]:
        return first_paragraphs_from(html, self.settings.digest_min_excerpt_length)

    def email_excerpt(self, html: str, post: Optional[Post] = None) -> Markup:
        return email_excerpt(
            html, self.formatter, self.settings.digest_min_excerpt_length, post
        )

    # -----------------------------------
    # Marque du site
    # -----------------------------------

    def logo_url(self) -> Optional[str]:
        return site.logo_url(self.settings)

    def html_site_link(self) -> Markup:
        return site.html_site_link(self.settings.base_url, self.site_name)

    def email_image_url(self, basename: str) -> str:
        return site.email_image_url(basename, self.settings)

    # -----------------------------------
    # Contenu personnalisé du digest
    # -----------------------------------

    def digest_custom_html(self, position: str) -> Markup:
        """Snippet HTML configuré pour une position du digest (ex: "above_footer")."""
        return self._digest_custom(self.settings.digest_custom_html, position)

    def digest_custom_text(self, position: str) -> Markup:
        """Snippet texte configuré pour une position du digest."""
        return self._digest_custom(self.settings.digest_custom_text, position)

    def _digest_custom(self, snippets, position: str) -> Markup:
        snippet = snippets.get(position)
        if not snippet:
            logger.debug("No custom digest content for position %r", position)
            return Markup("")
        return Markup(self.formatter.format(snippet))

    def __repr__(self) -> str:
        return f"NotificationHelpers(site_name={self.site_name!r}, base_url={self.settings.base_url!r})"
