"""
Correction de la marge haute du premier paragraphe d'un fragment.
"""

from markupsafe import Markup

from .parsing import parse_fragment, top_level_tags


def correct_top_margin(html: str, desired: str) -> Markup:
    """
    Remplace le style du premier <p> de premier niveau par une marge haute.

    Le style existant est écrasé, pas fusionné. Sans paragraphe de premier
    niveau, le fragment est renvoyé tel quel.

    Args:
        html: Fragment HTML
        desired: Valeur CSS de margin-top. Elle n'est pas échappée :
            l'appelant garantit qu'elle est sûre.

    Returns:
        Le fragment sérialisé, marqué comme sûr

    Example:
        >>> correct_top_margin('<p style="color: red">Hi</p>', "0")
        Markup('<p style="margin-top: 0;">Hi</p>')
    """
    fragment = parse_fragment(html)
    para = next((tag for tag in top_level_tags(fragment) if tag.name == "p"), None)
    if para is not None:
        para["style"] = f"margin-top: {desired};"
    return Markup(str(fragment))
