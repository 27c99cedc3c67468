"""
Tests de l'environnement Jinja2 des templates d'email.
"""

import dataclasses

from jinja2 import DictLoader

from digest_mailer.helpers import NotificationHelpers
from digest_mailer.templating import create_environment


def _render(helpers, source, **context):
    env = create_environment(helpers, loader=DictLoader({"t.html": source}))
    return env.get_template("t.html").render(**context)


class TestEnvironment:
    """Tests des filtres et globales enregistrés."""

    def test_site_link_is_not_escaped_twice(self, helpers):
        assert _render(helpers, "{{ html_site_link() }}") == (
            "<a href='https://forum.test'>Test Forum</a>"
        )

    def test_untrusted_values_are_escaped(self, helpers):
        assert _render(helpers, "{{ name }}", name="<b>") == "&lt;b&gt;"

    def test_indent_filter(self, helpers):
        assert _render(helpers, "{{ 'a\nb' | indent_text(4) }}") == "    a\n    b"

    def test_excerpt_filter(self, helpers, post):
        result = _render(helpers, "{{ post.cooked | email_excerpt(post) }}", post=post)
        assert '<a href="https://forum.test/u/bob">@bob</a>' in result

    def test_logo_global(self, helpers):
        assert _render(helpers, "{{ logo_url() }}") == "https://forum.test/logo.png"


class TestDigestPostTemplate:
    """Tests du template digest_post.html livré avec le package."""

    def test_renders_post(self, settings, post):
        helpers = NotificationHelpers(
            dataclasses.replace(settings, display_name_on_posts=True)
        )
        html = create_environment(helpers).get_template("digest_post.html").render(post=post)

        assert 'src="https://forum.test/logo.png"' in html
        assert "<strong>Jane Smith</strong>" in html
        assert "@jane_doe" in html
        assert '<p style="margin-top: 0;">Hello' in html
        assert 'href="https://forum.test/about"' in html
        assert "<a href='https://forum.test'>Test Forum</a>" in html

    def test_without_logo(self, settings, post):
        helpers = NotificationHelpers(dataclasses.replace(settings, site_logo_url=""))
        html = create_environment(helpers).get_template("digest_post.html").render(post=post)
        assert "site-logo" not in html
        assert "<strong>" not in html
