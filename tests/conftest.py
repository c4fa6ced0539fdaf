"""Pytest configuration and shared Larousse page fixtures."""
import pytest

from larousse_nodes import Element, Text


FOUND_URL = "https://www.larousse.fr/dictionnaires/francais/dormir/26439"
NOT_FOUND_URL = "https://www.larousse.fr/dictionnaires/francais/dormirr"


FOUND_PAGE = """<!DOCTYPE html>
<html>
<head><title>Définitions : dormir - Dictionnaire de français Larousse</title></head>
<body>
<div class="wrapper-search">
<section>
<article class="sel"><div class="item-result"><a href="/dictionnaires/francais/dormir/26439">dormir</a></div></article>
<article class="sous-article"><div class="item-result"><a href="/dictionnaires/francais/dormir/26441">dormir debout</a></div></article>
<article><div class="item-result"><a href="/dictionnaires/francais/dormir/26440"> dormir </a></div></article>
</section>
</div>
<article class="BlocDefinition">
<div class="Zone-Entree1 header-article">
<h2 class="AdresseDefinition">
<span class="linkaudio"></span>dormir</h2>
<p class="CatgramDefinition">verbe intransitif <a class="lienconj" href="/conjugaison/francais/dormir/">Conjugaison</a></p>
<p class="OrigineDefinition">(latin <i>dormire</i>)</p>
</div>
<ul class="Definitions">
<li class="DivisionDefinition">
<p class="numDef">1.</p>Être dans l'état de sommeil&nbsp;: <span class="ExempleDefinition">Dormir profondément.</span>
<p class="LibelleSynonyme">Synonymes :</p>
<p class="Synonymes">sommeiller - somnoler <span class="indicateurDefinition">(littéraire)</span> - <span class="Renvois"><a class="lienarticle" href="/dictionnaires/francais/reposer/68418">reposer</a></span></p>
</li>
<li class="DivisionDefinition">
<p class="numDef">2.</p>Rester inactif, dans l'inaction&nbsp;: <span class="ExempleDefinition">Ce n'est pas le moment de dormir.</span>
<p class="LibelleSynonyme">Contraire :</p>
<p class="Synonymes">veiller</p>
</li>
<li class="DivisionDefinition">
<p class="numDef">3.</p>Synonyme de <span class="Renvois"><a class="lienarticle" href="/dictionnaires/francais/sommeiller/73372">sommeiller</a></span>.
</li>
</ul>
<ul class="Definitions">
<li class="DivisionDefinition">
<p class="numDef">1.</p>Sens d'une autre forme.
</li>
</ul>
</article>
</body>
</html>
"""


NOT_FOUND_PAGE = """<!DOCTYPE html>
<html>
<body>
<div class="corrector">
<p>Le mot recherché n'a pas été trouvé. Essayez :</p>
<ul>
<li><h3><a href="/dictionnaires/francais/dormir/26439">dormir</a></h3></li>
<li><h3><a href="/dictionnaires/francais/dormeur/26435"> dormeur </a></h3></li>
</ul>
</div>
</body>
</html>
"""


SPELLING_PAGE = """<html><body>
<div class="Zone-Entree1">
<h2 class="AdresseDefinition">paye, paie</h2>
<h2 class="AdresseDefinition">
<span class="linkaudio"></span>paiement, payement
</h2>
<p class="CatgramDefinition">nom féminin</p>
<p class="OrigineDefinition">(de <span class="Renvois"><a href="/dictionnaires/francais/payer/58843">payer</a></span>)</p>
</div>
</body></html>
"""


MISSING_CATEGORY_PAGE = """<html><body>
<div class="Zone-Entree1">
<h2 class="AdresseDefinition">dormir</h2>
</div>
<ul class="Definitions">
<li class="DivisionDefinition"><p class="numDef">1.</p>Être dans l'état de sommeil.</li>
</ul>
</body></html>
"""


def el(tag, *children, cls=None, **attrs):
    """Build an Element; plain strings become Text nodes."""
    classes = tuple(cls.split()) if cls else ()
    if classes:
        attrs["class"] = " ".join(classes)
    nodes = tuple(Text(child) if isinstance(child, str) else child for child in children)
    return Element(tag=tag, attrs=tuple(attrs.items()), classes=classes, children=nodes)


@pytest.fixture
def found_page():
    return FOUND_PAGE


@pytest.fixture
def not_found_page():
    return NOT_FOUND_PAGE


@pytest.fixture
def spelling_page():
    return SPELLING_PAGE


@pytest.fixture
def missing_category_page():
    return MISSING_CATEGORY_PAGE
