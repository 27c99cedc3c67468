"""
Configuration du package : niveaux de logging et réglages du site.

Les réglages du site (`SiteSettings`) sont un objet explicite passé à chaque
helper, jamais un singleton global. Seuls les niveaux de logging restent
une configuration de processus verrouillable.
"""

import logging
import os
from dataclasses import dataclass, field, fields
from typing import Any, Mapping, Optional

from dotenv import load_dotenv

from .exceptions import ConfigurationError

# Préfixe des variables d'environnement lues par SiteSettings.from_env()
ENV_PREFIX = "DIGEST_"

DEFAULT_MIN_EXCERPT_LENGTH = 100

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class ConfigBase:
    # Attribut de classe pour le singleton
    _instance = None
    _locked: bool = False

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def lock(self):
        self._locked = True

    def __setattr__(self, name, value):
        if getattr(self, "_locked", False):
            raise AttributeError("Configuration is locked")
        super().__setattr__(name, value)


class Logger_Level(ConfigBase):
    level: int = logging.DEBUG
    console_level: int = logging.WARNING
    file_level: int = logging.DEBUG
    file_logging: bool = False


@dataclass(frozen=True)
class SiteSettings:
    """
    Réglages du site consultés lors du rendu des emails.

    Attributes:
        title: Nom du site, utilisé par défaut comme texte du lien du site
        base_url: URL de base de l'application (sans slash final)
        site_logo_url: Logo général du site
        site_digest_logo_url: Logo dédié aux emails de digest (prioritaire)
        digest_min_excerpt_length: Longueur de texte minimale d'un extrait
        enable_names: Les utilisateurs peuvent renseigner un nom complet
        display_name_on_posts: Le nom complet est affiché sur les messages
        digest_custom_html: Snippets HTML par position du digest
        digest_custom_text: Snippets texte par position du digest
    """

    title: str = ""
    base_url: str = ""
    site_logo_url: str = ""
    site_digest_logo_url: str = ""
    digest_min_excerpt_length: int = DEFAULT_MIN_EXCERPT_LENGTH
    enable_names: bool = True
    display_name_on_posts: bool = False
    digest_custom_html: Mapping[str, str] = field(default_factory=dict)
    digest_custom_text: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        if not isinstance(self.base_url, str):
            raise ConfigurationError("base_url", self.base_url, "expected a string")
        if self.digest_min_excerpt_length < 0:
            raise ConfigurationError(
                "digest_min_excerpt_length",
                self.digest_min_excerpt_length,
                "must be >= 0",
            )
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    def get(self, name: str) -> Any:
        """Retourne la valeur d'un réglage, ou None s'il n'existe pas."""
        if name.startswith("_") or name not in _FIELD_NAMES:
            return None
        return getattr(self, name)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "SiteSettings":
        """
        Construit les réglages depuis un dictionnaire.

        Les clés inconnues sont ignorées (avec un warning dans les logs).
        Les chaînes sont converties pour les réglages numériques et booléens.

        Raises:
            ConfigurationError: Si une valeur n'a pas le type attendu

        Example:
            >>> settings = SiteSettings.from_mapping({"title": "Forum"})
            >>> settings.get("title")
            'Forum'
        """
        from .logger import get_logger

        known = {}
        for key, value in values.items():
            if key in _FIELD_NAMES:
                known[key] = _coerce(key, value)
            else:
                get_logger(__name__).warning("Unknown site setting ignored: %s", key)
        return cls(**known)

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "SiteSettings":
        """
        Construit les réglages depuis les variables d'environnement.

        Charge d'abord le fichier .env (python-dotenv) puis lit les variables
        préfixées par DIGEST_ (ex: DIGEST_BASE_URL, DIGEST_SITE_LOGO_URL).

        Args:
            env_file: Chemin d'un fichier .env (None = recherche par défaut)

        Raises:
            ConfigurationError: Si une valeur numérique ou booléenne est invalide
        """
        load_dotenv(env_file)

        values: dict[str, Any] = {}
        for f in fields(cls):
            if f.name in ("digest_custom_html", "digest_custom_text"):
                continue
            raw = os.getenv(ENV_PREFIX + f.name.upper())
            if raw is None:
                continue
            values[f.name] = _coerce(f.name, raw)
        return cls(**values)


_FIELD_TYPES = {f.name: f.type for f in fields(SiteSettings)}
_FIELD_NAMES = frozenset(_FIELD_TYPES)


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(name, raw, "expected a boolean")


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        raise ConfigurationError(name, raw, "expected an integer") from None


def _coerce(name: str, value: Any) -> Any:
    """Convertit une valeur brute vers le type du réglage `name`."""
    expected = _FIELD_TYPES[name]
    if expected is bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return _parse_bool(name, value)
        raise ConfigurationError(name, value, "expected a boolean")
    if expected is int:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        if isinstance(value, str):
            return _parse_int(name, value)
        raise ConfigurationError(name, value, "expected an integer")
    if expected is str:
        if isinstance(value, str):
            return value
        raise ConfigurationError(name, value, "expected a string")
    if not isinstance(value, Mapping):
        raise ConfigurationError(name, value, "expected a mapping")
    return value
