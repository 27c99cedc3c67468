"""
Éléments de marque du site dans les emails : logo, lien et images.
"""

from typing import Optional

from markupsafe import Markup

from .config import SiteSettings
from .logger import get_logger

logger = get_logger(__name__)


def _usable_logo(url: Optional[str]) -> bool:
    # Les clients email affichent mal le SVG
    return bool(url and url.strip()) and not url.lower().endswith(".svg")


def logo_url(settings: SiteSettings) -> Optional[str]:
    """
    Choisit le logo à afficher dans un email.

    Le logo de digest est prioritaire. S'il est vide ou en SVG, le logo
    général du site est utilisé ; s'il est lui aussi vide ou en SVG, aucun
    logo n'est affiché (None).
    """
    url = settings.get("site_digest_logo_url")
    if not _usable_logo(url):
        url = settings.get("site_logo_url")
    if not _usable_logo(url):
        logger.debug("No PNG/JPEG logo configured, emails are sent without logo")
        return None
    return url


def html_site_link(base_url: str, site_name: str) -> Markup:
    """
    Lien HTML vers le site, avec le nom du site comme texte.

    L'URL et le nom sont échappés avant d'être insérés dans la balise.

    Example:
        >>> html_site_link("https://forum.test", "Q&A")
        Markup("<a href='https://forum.test'>Q&amp;A</a>")
    """
    return Markup("<a href='{}'>{}</a>").format(base_url, site_name)


def email_image_url(basename: str, settings: SiteSettings) -> str:
    """URL absolue d'une image statique des emails (/images/emails/)."""
    return f"{settings.base_url}/images/emails/{basename}"
