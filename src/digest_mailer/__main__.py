"""
Point d'entrée en ligne de commande : affiche l'extrait email d'un fichier HTML.

Usage :
    python -m digest_mailer post.html --min-length 120 --base-url https://forum.test

Les options absentes sont lues depuis SiteSettings.from_env() (.env et
variables DIGEST_*).
"""

import argparse
import dataclasses
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import SiteSettings
from .exceptions import ConfigurationError
from .helpers import NotificationHelpers
from .logger import get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="digest_mailer",
        description="Affiche l'extrait email d'un message HTML.",
    )
    parser.add_argument("html_file", type=Path, help="Fichier HTML du message")
    parser.add_argument("--min-length", type=int, help="Longueur minimale de l'extrait")
    parser.add_argument("--base-url", help="URL de base du site")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Lit le fichier HTML, calcule son extrait et l'écrit sur stdout.

    Returns:
        Code de sortie (0 = succès, 1 = fichier illisible, 2 = configuration invalide)
    """
    args = build_parser().parse_args(argv)

    try:
        settings = SiteSettings.from_env()
        overrides = {}
        if args.min_length is not None:
            overrides["digest_min_excerpt_length"] = args.min_length
        if args.base_url is not None:
            overrides["base_url"] = args.base_url
        settings = dataclasses.replace(settings, **overrides)
    except ConfigurationError as e:
        logger.error("Invalid configuration: %s", e)
        print(f"❌ {e}", file=sys.stderr)
        return 2

    try:
        html = args.html_file.read_text(encoding="utf-8")
    except OSError as e:
        logger.error("Cannot read %s: %s", args.html_file, e)
        print(f"❌ Impossible de lire {args.html_file}: {e}", file=sys.stderr)
        return 1

    helpers = NotificationHelpers(settings)
    print(helpers.email_excerpt(html))
    return 0


if __name__ == "__main__":
    sys.exit(main())
