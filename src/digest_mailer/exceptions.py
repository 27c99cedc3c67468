"""
Exceptions spécifiques au package digest_mailer.

Les helpers de rendu ne lèvent pas d'erreur : une entrée vide ou un HTML
dégénéré produit une sortie vide ou None. Seul le chargement de la
configuration peut échouer.
"""


class ConfigurationError(ValueError):
    """
    Exception levée quand un réglage du site ne peut pas être interprété.

    Attributes:
        setting: Nom du réglage fautif
        value: Valeur brute reçue
    """

    def __init__(self, setting: str, value: object, reason: str):
        self.setting = setting
        self.value = value
        super().__init__(f"Invalid value for {setting!r}: {value!r} ({reason})")

    def __repr__(self) -> str:
        return f"ConfigurationError(setting={self.setting!r}, value={self.value!r})"
