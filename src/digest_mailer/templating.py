"""
Environnement Jinja2 des templates d'email.

Les helpers sont enregistrés comme filtres (transformations de texte/HTML)
et comme globales (valeurs dérivées des réglages du site).
"""

from typing import Optional

from jinja2 import BaseLoader, Environment, PackageLoader, select_autoescape

from .helpers import NotificationHelpers


def create_environment(
    helpers: NotificationHelpers,
    loader: Optional[BaseLoader] = None,
) -> Environment:
    """
    Crée un environnement Jinja2 avec les helpers de notification.

    Args:
        helpers: Contexte de rendu (réglages, formateur, nom du site)
        loader: Loader des templates (défaut: templates/ du package)

    Returns:
        Environnement avec autoescape pour .html/.xml

    Example:
        >>> env = create_environment(helpers)
        >>> env.get_template("digest_post.html").render(post=post)
    """
    env = Environment(
        loader=loader or PackageLoader("digest_mailer", "templates"),
        autoescape=select_autoescape(["html", "xml"]),
    )

    env.filters.update(
        indent_text=helpers.indent,
        correct_top_margin=helpers.correct_top_margin,
        email_excerpt=helpers.email_excerpt,
        normalize_name=helpers.normalize_name,
    )
    env.globals.update(
        helpers=helpers,
        site_name=helpers.site_name,
        logo_url=helpers.logo_url,
        html_site_link=helpers.html_site_link,
        email_image_url=helpers.email_image_url,
        digest_custom_html=helpers.digest_custom_html,
        digest_custom_text=helpers.digest_custom_text,
        show_username_on_post=helpers.show_username_on_post,
        show_name_on_post=helpers.show_name_on_post,
    )
    return env
