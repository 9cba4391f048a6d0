"""Site themes.

Both themes render the same ads and web results; they only differ in
stylesheet and in how much the ad copy is dressed up.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from django.conf import settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SiteTheme:
	key: str
	label: str
	stylesheet: str
	body_class: str
	# Render ad descriptions one pseudo-sentence per line.
	split_descriptions: bool


GLASS = SiteTheme(
	key="glass",
	label="Wellness (glass)",
	stylesheet="theming/glass.css",
	body_class="theme-glass",
	split_descriptions=True,
)

CLASSIC = SiteTheme(
	key="classic",
	label="Classic results",
	stylesheet="theming/classic.css",
	body_class="theme-classic",
	split_descriptions=False,
)

THEMES = {theme.key: theme for theme in (GLASS, CLASSIC)}
DEFAULT_THEME = GLASS


def get_site_theme() -> SiteTheme:
	key = str(getattr(settings, "SITE_THEME", "") or "").strip().lower()
	if not key:
		return DEFAULT_THEME

	theme = THEMES.get(key)
	if theme is None:
		logger.warning("Unknown SITE_THEME=%r, using %r", key, DEFAULT_THEME.key)
		return DEFAULT_THEME
	return theme
