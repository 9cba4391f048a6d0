"""Seed demo ads and web results.

Writes go through the configured record store, so this seeds either the local
database or the hosted tables. Safe to re-run: titles that already exist are
skipped.
"""

from django.core.management.base import BaseCommand, CommandError

from siteads import repository
from siteads.store import RecordStoreError

DEMO_ADS = [
    {
        "title": "Organic Greens Daily Blend",
        "description": "Twelve superfoods in one scoop. No added sugar. Ships free this week.",
        "url": "https://example.com/greens",
        "image_url": "https://images.example.com/greens-banner.jpg",
        "is_featured": True,
    },
    {
        "title": "Mindful Mornings Yoga",
        "description": "Gentle 20-minute flows. Beginner friendly.",
        "url": "https://example.com/yoga",
        "image_url": "",
        "is_featured": False,
    },
    {
        "title": "Herbal Sleep Tea",
        "description": "Chamomile, lavender and lemon balm. Caffeine free.",
        "url": "https://example.com/tea",
        "image_url": "",
        "is_featured": False,
    },
]

DEMO_WEB_RESULTS = [
    {
        "title": "10 Habits for a Healthier Week",
        "description": "Small, realistic changes that add up.",
        "url": "https://example.com/articles/healthy-habits",
        "display_order": 10,
    },
    {
        "title": "Understanding Plant-Based Protein",
        "description": "How much you need and where to find it.",
        "url": "https://example.com/articles/plant-protein",
        "display_order": 20,
    },
    {
        "title": "Walking vs Running",
        "description": "What the research says about low-impact cardio.",
        "url": "https://example.com/articles/walking-running",
        "display_order": 30,
    },
]


class Command(BaseCommand):
    help = "Seed demo ads (one featured) and web results."

    def handle(self, *args, **options):
        try:
            ads = repository.list_ads()
            existing_ads = {ad.title for ad in ads}
            has_featured = any(ad.is_featured for ad in ads)
            existing_results = {result.title for result in repository.list_web_results()}

            created = 0
            for values in DEMO_ADS:
                if values["title"] in existing_ads:
                    continue
                # Only one ad may be featured at a time.
                if values["is_featured"] and has_featured:
                    values = {**values, "is_featured": False}
                repository.create_ad(values)
                has_featured = has_featured or values["is_featured"]
                created += 1
            self.stdout.write(self.style.SUCCESS(f"Seeded {created} ad(s)."))

            created = 0
            for values in DEMO_WEB_RESULTS:
                if values["title"] in existing_results:
                    continue
                repository.create_web_result(values)
                created += 1
            self.stdout.write(self.style.SUCCESS(f"Seeded {created} web result(s)."))
        except RecordStoreError as e:
            raise CommandError(f"Seeding failed: {e}") from e
