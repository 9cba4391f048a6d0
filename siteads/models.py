"""Ads models.

These back the local record store. The table names match the hosted
PostgREST tables so either backend answers to the same names.
"""

import uuid

from django.db import models


class Ad(models.Model):
    """A sponsored ad; at most one is featured on the home page."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.TextField()
    description = models.TextField()
    url = models.TextField()
    image_url = models.TextField(null=True, blank=True)
    is_featured = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "ads"

    def __str__(self) -> str:
        if self.is_featured:
            return f"{self.title} (featured)"
        return self.title


class WebResult(models.Model):
    """A plain (non-sponsored) link listed under the ads."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.TextField()
    description = models.TextField()
    url = models.TextField()
    display_order = models.IntegerField(default=0, help_text="Lower is shown first.")

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "web_results"

    def __str__(self) -> str:
        return f"#{self.display_order}: {self.title}"
