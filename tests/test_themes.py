from __future__ import annotations

from django.test import RequestFactory

from theming.context_processors import site_theme
from theming.themes import CLASSIC, GLASS, get_site_theme


def test_default_theme(settings):
    settings.SITE_THEME = ""
    assert get_site_theme() is GLASS


def test_theme_from_settings(settings):
    settings.SITE_THEME = " Classic "
    assert get_site_theme() is CLASSIC


def test_unknown_theme_falls_back_with_warning(settings, caplog):
    settings.SITE_THEME = "neon"
    assert get_site_theme() is GLASS
    assert "Unknown SITE_THEME='neon'" in caplog.text


def test_context_processor(settings):
    settings.SITE_THEME = "classic"
    settings.SITE_NAME = "Test Site"
    context = site_theme(RequestFactory().get("/"))
    assert context == {"site_theme": CLASSIC, "site_name": "Test Site"}
