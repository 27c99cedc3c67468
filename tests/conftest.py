"""
Configuration pytest pour les tests digest-mailer.

Ce fichier contient les fixtures communes à tous les tests.
"""

import pytest

from digest_mailer.config import SiteSettings
from digest_mailer.helpers import NotificationHelpers
from digest_mailer.models import Post, User


@pytest.fixture
def settings():
    """
    Fixture fournissant des réglages de site complets.

    Returns:
        SiteSettings avec logo PNG, URL de base et extrait minimal de 20 caractères
    """
    return SiteSettings(
        title="Test Forum",
        base_url="https://forum.test/",
        site_logo_url="https://forum.test/logo.png",
        site_digest_logo_url="",
        digest_min_excerpt_length=20,
        digest_custom_html={"below_post": "<p><a href='/about'>About</a></p>"},
        digest_custom_text={"above_footer": "Unsubscribe anytime"},
    )


@pytest.fixture
def helpers(settings):
    """Fixture fournissant un contexte de rendu basé sur `settings`."""
    return NotificationHelpers(settings)


@pytest.fixture
def post():
    """Fixture fournissant un message dont l'auteur a un nom complet."""
    return Post(
        url="/t/welcome/1/3",
        user=User(username="jane_doe", name="Jane Smith"),
        cooked="<p>Hello <a href='/u/bob'>@bob</a>, welcome to the forum!</p>",
    )
