"""
Tests du point d'entrée en ligne de commande.
"""

import os

import pytest

from digest_mailer.__main__ import main


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    for key in list(os.environ):
        if key.startswith("DIGEST_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


def test_prints_excerpt(tmp_path, capsys):
    html_file = tmp_path / "post.html"
    html_file.write_text(
        "<p>First paragraph <a href='/u/bob'>bob</a></p><p>Second</p>", encoding="utf-8"
    )

    code = main([str(html_file), "--min-length", "5", "--base-url", "https://f.test"])

    out = capsys.readouterr().out
    assert code == 0
    assert 'href="https://f.test/u/bob"' in out
    assert "Second" not in out


def test_missing_file(tmp_path, capsys):
    code = main([str(tmp_path / "missing.html")])
    assert code == 1
    assert "missing.html" in capsys.readouterr().err


def test_invalid_configuration(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("DIGEST_DIGEST_MIN_EXCERPT_LENGTH", "abc")
    html_file = tmp_path / "post.html"
    html_file.write_text("<p>x</p>", encoding="utf-8")

    assert main([str(html_file)]) == 2
    assert "digest_min_excerpt_length" in capsys.readouterr().err


def test_negative_min_length_option(tmp_path):
    html_file = tmp_path / "post.html"
    html_file.write_text("<p>x</p>", encoding="utf-8")
    assert main([str(html_file), "--min-length", "-1"]) == 2
