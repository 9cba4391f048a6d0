from __future__ import annotations

from datetime import timedelta

import pytest
from django.utils import timezone

from siteads.models import Ad, WebResult
from siteads.store import (
    DjangoRecordStore,
    PostgrestRecordStore,
    RecordStoreError,
    get_record_store,
)


@pytest.fixture
def store():
    return DjangoRecordStore()


@pytest.mark.django_db
class TestDjangoSelect:

    def test_select_returns_all_columns_as_plain_values(self, store, make_ad):
        ad = make_ad(title="Greens", image_url=None)
        rows = store.table("ads").select().execute()
        assert len(rows) == 1
        row = rows[0]
        assert row["id"] == str(ad.id)
        assert row["title"] == "Greens"
        assert row["image_url"] is None
        assert row["is_featured"] is False
        assert isinstance(row["created_at"], str)

    def test_select_named_columns(self, store, make_ad):
        make_ad(title="Greens")
        rows = store.table("ads").select("id, title").execute()
        assert set(rows[0]) == {"id", "title"}

    def test_eq_filters_rows(self, store, make_ad):
        make_ad(title="Plain")
        make_ad(title="Star", is_featured=True)
        rows = store.table("ads").select().eq("is_featured", True).execute()
        assert [r["title"] for r in rows] == ["Star"]

    def test_order_and_limit(self, store, make_web_result):
        make_web_result(title="third", display_order=30)
        make_web_result(title="first", display_order=10)
        make_web_result(title="second", display_order=20)

        asc = store.table("web_results").select().order("display_order").limit(2).execute()
        assert [r["title"] for r in asc] == ["first", "second"]

        desc = store.table("web_results").select().order("display_order", ascending=False).execute()
        assert [r["title"] for r in desc] == ["third", "second", "first"]

    def test_order_by_created_at_descending(self, store, make_ad):
        older = make_ad(title="older")
        newer = make_ad(title="newer")
        now = timezone.now()
        Ad.objects.filter(pk=older.pk).update(created_at=now - timedelta(days=1))
        Ad.objects.filter(pk=newer.pk).update(created_at=now)

        rows = store.table("ads").select().order("created_at", ascending=False).execute()
        assert [r["title"] for r in rows] == ["newer", "older"]

    def test_single_returns_the_only_row(self, store, make_ad):
        make_ad(title="Star", is_featured=True)
        row = store.table("ads").select().eq("is_featured", True).single()
        assert row["title"] == "Star"

    def test_single_with_no_rows_raises(self, store):
        with pytest.raises(RecordStoreError, match="found none"):
            store.table("ads").select().eq("is_featured", True).single()

    def test_single_with_several_rows_raises(self, store, make_ad):
        make_ad(is_featured=True)
        make_ad(is_featured=True)
        with pytest.raises(RecordStoreError, match="found 2"):
            store.table("ads").select().eq("is_featured", True).single()

    def test_unknown_table_raises(self, store):
        with pytest.raises(RecordStoreError, match="Unknown table"):
            store.table("nope").select().execute()

    def test_unknown_column_raises(self, store):
        with pytest.raises(RecordStoreError):
            store.table("ads").select().eq("colour", "red").execute()

    def test_malformed_id_raises(self, store):
        with pytest.raises(RecordStoreError):
            store.table("ads").select().eq("id", "not-a-uuid").execute()


@pytest.mark.django_db
class TestDjangoWrites:

    def test_insert_assigns_id(self, store):
        rows = store.table("ads").insert(
            [{"title": "A", "description": "B. C.", "url": "https://x.test", "image_url": "", "is_featured": False}]
        ).execute()
        assert len(rows) == 1
        assert rows[0]["id"]
        assert rows[0]["image_url"] == ""
        assert Ad.objects.filter(pk=rows[0]["id"]).exists()

    def test_insert_rejects_blank_required_text(self, store):
        with pytest.raises(RecordStoreError):
            store.table("ads").insert([{"title": "", "description": "B", "url": "https://x.test"}]).execute()
        assert Ad.objects.count() == 0

    def test_insert_rejects_unknown_column(self, store):
        with pytest.raises(RecordStoreError):
            store.table("web_results").insert([{"title": "A", "description": "B", "url": "u", "rank": 1}]).execute()

    def test_update_replaces_fields(self, store, make_web_result):
        result = make_web_result(title="Old", display_order=5)
        rows = (
            store.table("web_results")
            .update({"title": "New", "display_order": 1})
            .eq("id", str(result.id))
            .execute()
        )
        assert rows[0]["title"] == "New"
        result.refresh_from_db()
        assert (result.title, result.display_order) == ("New", 1)

    def test_update_unmatched_id_returns_no_rows(self, store):
        rows = (
            store.table("ads")
            .update({"title": "New"})
            .eq("id", "00000000-0000-0000-0000-000000000000")
            .execute()
        )
        assert rows == []

    def test_update_rejects_primary_key(self, store, make_ad):
        ad = make_ad()
        with pytest.raises(RecordStoreError, match="immutable"):
            store.table("ads").update({"id": "00000000-0000-0000-0000-000000000000"}).eq("id", str(ad.id)).execute()

    def test_update_without_filter_is_refused(self, store, make_ad):
        make_ad(title="Keep")
        with pytest.raises(RecordStoreError, match="Refusing"):
            store.table("ads").update({"title": "Gone"}).execute()
        assert Ad.objects.get().title == "Keep"

    def test_delete_by_id(self, store, make_web_result):
        keep = make_web_result(title="keep")
        drop = make_web_result(title="drop")
        rows = store.table("web_results").delete().eq("id", str(drop.id)).execute()
        assert [r["title"] for r in rows] == ["drop"]
        assert list(WebResult.objects.values_list("pk", flat=True)) == [keep.pk]

    def test_delete_without_filter_is_refused(self, store, make_ad):
        make_ad()
        with pytest.raises(RecordStoreError, match="Refusing"):
            store.table("ads").delete().execute()
        assert Ad.objects.count() == 1


class TestGetRecordStore:

    def test_defaults_to_django(self, settings):
        settings.RECORD_STORE_BACKEND = "DJANGO"
        assert isinstance(get_record_store(), DjangoRecordStore)

    def test_postgrest_backend_from_settings(self, settings):
        settings.RECORD_STORE_BACKEND = "postgrest"
        settings.SUPABASE_URL = "https://project.supabase.test/"
        settings.SUPABASE_ANON_KEY = "anon"
        settings.RECORD_STORE_TIMEOUT = 7
        store = get_record_store()
        assert isinstance(store, PostgrestRecordStore)
        assert store.base_url == "https://project.supabase.test"
        assert store.timeout == 7

    def test_postgrest_without_url_raises(self, settings):
        settings.RECORD_STORE_BACKEND = "POSTGREST"
        settings.SUPABASE_URL = ""
        with pytest.raises(RecordStoreError, match="SUPABASE_URL"):
            get_record_store()

    def test_unknown_backend_raises(self, settings):
        settings.RECORD_STORE_BACKEND = "MONGO"
        with pytest.raises(RecordStoreError, match="MONGO"):
            get_record_store()
