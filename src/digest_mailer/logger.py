"""
Module de configuration du logging pour digest-mailer.

Ce module fournit une fonction centralisée pour configurer le système de logging
avec sortie console et, sur demande, fichier. Tous les modules du package
utilisent `get_logger(__name__)` pour obtenir un logger configuré de manière
cohérente.

Fonctionnalités :
- Regroupement des logs fichier par session dans logs/run_YYYYMMDD_HHMMSS/
- Création différée du répertoire et du fichier de log (évite fichiers vides)
- Journalisation fichier désactivée par défaut (Logger_Level.file_logging)
"""

import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional

from .config import Logger_Level


# ============================================================
# 🔹 Gestionnaire de session de logs
# ============================================================


class LogSession:
    """
    Gestionnaire singleton pour regrouper tous les logs d'une exécution.

    Calcule un répertoire unique par session : logs/run_YYYYMMDD_HHMMSS/.
    Le répertoire n'est créé qu'à l'écriture du premier message.
    """

    _instance: Optional["LogSession"] = None
    _session_dir: Optional[Path] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if LogSession._session_dir is not None:
            return

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        LogSession._session_dir = Path("logs") / f"run_{timestamp}"

    @classmethod
    def get_session_dir(cls) -> Path:
        """Retourne le répertoire de la session en cours."""
        if cls._session_dir is None:
            cls()
        assert cls._session_dir is not None
        return cls._session_dir

    @classmethod
    def reset(cls):
        """Reset la session (utile pour les tests)."""
        cls._instance = None
        cls._session_dir = None


# ============================================================
# 🔹 Handlers de logging
# ============================================================


class LazyFileHandler(logging.Handler):
    """
    Handler qui crée le fichier de log seulement au premier message.

    Évite la création de fichiers vides quand le logger n'est jamais utilisé.
    """

    def __init__(
        self,
        filename: Path,
        mode: str = "a",
        encoding: str = "utf-8",
        level: int = logging.NOTSET,
    ):
        super().__init__(level)
        self.filename = filename
        self.mode = mode
        self.encoding = encoding
        self._handler: Optional[logging.FileHandler] = None

    def _ensure_handler(self):
        """Crée le FileHandler sous-jacent si pas encore fait."""
        if self._handler is None:
            self.filename.parent.mkdir(parents=True, exist_ok=True)
            self._handler = logging.FileHandler(
                self.filename,
                mode=self.mode,
                encoding=self.encoding,
            )
            if self.formatter:
                self._handler.setFormatter(self.formatter)

    def emit(self, record):
        """Émet un log, en créant le fichier si nécessaire."""
        try:
            self._ensure_handler()
            if self._handler:
                self._handler.emit(record)
        except Exception:
            self.handleError(record)

    def close(self):
        """Ferme le handler sous-jacent si existant."""
        if self._handler:
            self._handler.close()
        super().close()


# ============================================================
# 🔹 Configuration des loggers
# ============================================================


def setup_logger(
    name: str,
    log_dir: Optional[str] = None,
    level: Optional[int] = None,
    console_level: Optional[int] = None,
    file_level: Optional[int] = None,
    log_filename: str = "digest_mailer.log",
) -> logging.Logger:
    """
    Configure un logger avec sortie console et, si demandé, fichier.

    Args:
        name: Nom du logger (généralement __name__ du module)
        log_dir: Répertoire des logs fichier. Si fourni, active le fichier
            même quand Logger_Level.file_logging est False.
        level: Niveau global du logger (None = Logger_Level.level)
        console_level: Niveau de la sortie console (None = Logger_Level)
        file_level: Niveau du fichier (None = Logger_Level)
        log_filename: Nom du fichier de log

    Returns:
        Logger configuré

    Example:
        >>> logger = setup_logger(__name__)
        >>> logger.debug("Extrait de secours utilisé")
    """
    config = Logger_Level()
    logger = logging.getLogger(name)
    logger.setLevel(config.level if level is None else level)

    # Éviter d'ajouter des handlers multiples si déjà configuré
    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(
        config.console_level if console_level is None else console_level
    )
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_dir is None and not config.file_logging:
        return logger

    session_dir = LogSession.get_session_dir() if log_dir is None else Path(log_dir)
    file_handler = LazyFileHandler(
        filename=session_dir / log_filename,
        mode="a",
        encoding="utf-8",
    )
    file_handler.setLevel(config.file_level if file_level is None else file_level)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    return logger


def get_logger(name: str, log_filename: Optional[str] = None) -> logging.Logger:
    """
    Récupère un logger existant ou en crée un nouveau avec la configuration par défaut.

    Args:
        name: Nom du logger (généralement __name__ du module)
        log_filename: Nom optionnel du fichier de log

    Returns:
        Logger configuré
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        return setup_logger(name, log_filename=log_filename or "digest_mailer.log")

    return logger

