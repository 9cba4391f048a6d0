"""Template helpers for rendering ads and web results."""

from __future__ import annotations

from django import template

from siteads.records import split_sentences

register = template.Library()


@register.filter
def sentences(text: str) -> list[str]:
	"""Split a description into pseudo-sentences ("B. C." -> ["B.", "C."])."""
	return split_sentences(text)


@register.inclusion_tag("siteads/_ad_card.html", takes_context=True)
def ad_card(context, ad, featured: bool = False):
	"""Render one ad card the way the active theme wants it."""
	theme = context.get("site_theme")
	return {
		"ad": ad,
		"featured": featured,
		"split_descriptions": bool(theme and theme.split_descriptions and not featured),
	}


@register.inclusion_tag("siteads/_web_results.html")
def web_results_list(results):
	"""Render the "Web Results" block; renders nothing when empty."""
	return {"results": list(results or [])}
