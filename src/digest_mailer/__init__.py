"""
Helpers de rendu des emails de notification et de digest.

Digest Mailer fournit les petites transformations de texte et de HTML
utilisées par les templates d'email d'un forum : extrait des messages,
logo et lien du site, mise en forme pour les clients email.

Organisation du package :
- config.py : Réglages du site (SiteSettings) et niveaux de logging
- logger.py : Configuration centralisée du logging
- text.py : Indentation, normalisation et affichage des noms
- site.py : Logo, lien du site et images des emails
- formatting.py : Réécriture du HTML pour les clients email
- htmlfragment/ : Parsing BeautifulSoup, marge haute, extraits de digest
- helpers.py : Contexte de rendu NotificationHelpers
- templating.py : Environnement Jinja2 avec les helpers

Usage minimal :
    >>> from digest_mailer import NotificationHelpers, SiteSettings
    >>>
    >>> settings = SiteSettings(
    ...     title="Mon Forum",
    ...     base_url="https://forum.example.com",
    ...     site_logo_url="https://forum.example.com/logo.png",
    ...     digest_min_excerpt_length=100,
    ... )
    >>> helpers = NotificationHelpers(settings)
    >>> helpers.email_excerpt("<p>Bonjour <a href='/u/bob'>@bob</a></p>")
    Markup('<p>Bonjour <a href="https://forum.example.com/u/bob">@bob</a></p>')

Configuration :
    SiteSettings.from_env() lit un fichier .env puis les variables DIGEST_* :

        DIGEST_TITLE=Mon Forum
        DIGEST_BASE_URL=https://forum.example.com
        DIGEST_SITE_LOGO_URL=https://forum.example.com/logo.png
        DIGEST_DIGEST_MIN_EXCERPT_LENGTH=100

Version: 0.1.0
"""

from .config import SiteSettings
from .exceptions import ConfigurationError
from .models import Post, User

from .text import indent, normalize_name, show_name_on_post, show_username_on_post
from .site import email_image_url, html_site_link, logo_url
from .formatting import AbsoluteUrlFormatter, EmailFormatter
from .htmlfragment import correct_top_margin, first_paragraphs_from
from .helpers import NotificationHelpers, email_excerpt
from .templating import create_environment

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Configuration
    "SiteSettings",
    "ConfigurationError",
    # Modèles
    "Post",
    "User",
    # Helpers
    "indent",
    "normalize_name",
    "show_name_on_post",
    "show_username_on_post",
    "correct_top_margin",
    "first_paragraphs_from",
    "email_excerpt",
    "logo_url",
    "html_site_link",
    "email_image_url",
    # Classes
    "AbsoluteUrlFormatter",
    "EmailFormatter",
    "NotificationHelpers",
    # Templates
    "create_environment",
]
