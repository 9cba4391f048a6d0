from __future__ import annotations

from django.conf import settings

from .themes import get_site_theme


def site_theme(request):
	"""Expose the active theme and site name to templates."""
	return {
		"site_theme": get_site_theme(),
		"site_name": getattr(settings, "SITE_NAME", "Wholesome Wellness Way"),
	}
