from __future__ import annotations

from django.template import Context, Template

from siteads.records import AdRecord, WebResultRecord
from theming.themes import CLASSIC, GLASS


def _render(source: str, **context) -> str:
    return Template("{% load siteads_tags %}" + source).render(Context(context))


def test_sentences_filter():
    out = _render("{% for line in text|sentences %}[{{ line }}]{% endfor %}", text="B. C.")
    assert out == "[B.][C.]"


def test_ad_card_follows_theme():
    ad = AdRecord(id="1", title="A", description="B. C.", url="https://x.test")

    glass = _render("{% ad_card ad %}", ad=ad, site_theme=GLASS)
    classic = _render("{% ad_card ad %}", ad=ad, site_theme=CLASSIC)

    assert '<p class="ad-line">B.</p>' in glass
    assert '<p class="ad-description">B. C.</p>' in classic


def test_featured_ad_card_keeps_paragraph():
    ad = AdRecord(id="1", title="A", description="B. C.", url="https://x.test", is_featured=True)
    out = _render("{% ad_card ad featured=True %}", ad=ad, site_theme=GLASS)
    assert "ad-card-featured" in out
    assert "ad-line" not in out


def test_ad_card_escapes_content():
    ad = AdRecord(id="1", title="<script>x</script>", description="d", url="https://x.test")
    out = _render("{% ad_card ad %}", ad=ad, site_theme=GLASS)
    assert "<script>" not in out
    assert "&lt;script&gt;" in out


def test_web_results_list():
    results = [WebResultRecord(id="1", title="First", description="About.", url="https://one.test")]
    out = _render("{% web_results_list results %}", results=results)
    assert "Web Results" in out
    assert 'href="https://one.test"' in out


def test_web_results_list_empty_renders_nothing():
    assert _render("{% web_results_list results %}", results=[]).strip() == ""
