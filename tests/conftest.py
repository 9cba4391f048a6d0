from __future__ import annotations

import pytest

from siteads.models import Ad, WebResult


@pytest.fixture
def make_ad(db):
    def _make(**overrides):
        values = {
            "title": "Sample ad",
            "description": "Sample description.",
            "url": "https://ad.test",
            "image_url": "",
            "is_featured": False,
        }
        values.update(overrides)
        return Ad.objects.create(**values)

    return _make


@pytest.fixture
def make_web_result(db):
    def _make(**overrides):
        values = {
            "title": "Sample result",
            "description": "Sample result description.",
            "url": "https://result.test",
            "display_order": 0,
        }
        values.update(overrides)
        return WebResult.objects.create(**values)

    return _make
