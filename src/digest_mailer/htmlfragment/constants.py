"""
Constantes utilisées pour le parsing et la manipulation des fragments HTML.
"""

# Backend BeautifulSoup utilisé partout dans le package
HTML_PARSER = "html.parser"

# Balises de premier niveau retenues pour un extrait de digest
EXCERPT_TAGS = {"p", "ul", "blockquote"}

# Aperçu enrichi d'un lien (<aside class="onebox">)
ONEBOX_TAG = "aside"
ONEBOX_CLASS = "onebox"

# Balises de premier niveau acceptées comme extrait de secours
FALLBACK_TAGS = {"p", "div"}

# Conteneur d'image agrandissable (<div class="lightbox-wrapper">)
LIGHTBOX_CLASS = "lightbox-wrapper"

# Balises retirées avant l'envoi par email
IGNORED_TAGS = {"script", "style"}
