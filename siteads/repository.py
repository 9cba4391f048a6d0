"""Data access for ads and web results.

Thin passthroughs to the record store. Every function may raise
RecordStoreError; callers decide what the user sees.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from .records import AdRecord, WebResultRecord
from .store import RecordStoreError, get_record_store

ADS_TABLE = "ads"
WEB_RESULTS_TABLE = "web_results"

AD_FIELDS = ("title", "description", "url", "image_url", "is_featured")
WEB_RESULT_FIELDS = ("title", "description", "url", "display_order")


def _pick(values: Mapping[str, Any], fields: tuple[str, ...]) -> dict[str, Any]:
    return {name: values[name] for name in fields if name in values}


def list_ads(
    *,
    featured: Optional[bool] = None,
    limit: Optional[int] = None,
    newest_first: bool = False,
) -> list[AdRecord]:
    query = get_record_store().table(ADS_TABLE).select()
    if featured is not None:
        query = query.eq("is_featured", featured)
    if newest_first:
        query = query.order("created_at", ascending=False)
    if limit is not None:
        query = query.limit(limit)
    return [AdRecord.from_row(row) for row in query.execute()]


def get_featured_ad() -> AdRecord:
    """Return the one featured ad.

    Zero featured ads and several featured ads both raise RecordStoreError.
    """
    row = get_record_store().table(ADS_TABLE).select().eq("is_featured", True).single()
    return AdRecord.from_row(row)


def create_ad(values: Mapping[str, Any]) -> AdRecord:
    rows = get_record_store().table(ADS_TABLE).insert([_pick(values, AD_FIELDS)]).execute()
    if not rows:
        raise RecordStoreError("Insert into 'ads' returned no row.")
    return AdRecord.from_row(rows[0])


def update_ad(ad_id: str, values: Mapping[str, Any]) -> AdRecord:
    rows = get_record_store().table(ADS_TABLE).update(_pick(values, AD_FIELDS)).eq("id", ad_id).execute()
    if not rows:
        raise RecordStoreError(f"No ad with id={ad_id!r}.")
    return AdRecord.from_row(rows[0])


def delete_ad(ad_id: str) -> None:
    rows = get_record_store().table(ADS_TABLE).delete().eq("id", ad_id).execute()
    if not rows:
        raise RecordStoreError(f"No ad with id={ad_id!r}.")


def list_web_results(*, limit: Optional[int] = None) -> list[WebResultRecord]:
    query = get_record_store().table(WEB_RESULTS_TABLE).select().order("display_order", ascending=True)
    if limit is not None:
        query = query.limit(limit)
    return [WebResultRecord.from_row(row) for row in query.execute()]


def create_web_result(values: Mapping[str, Any]) -> WebResultRecord:
    rows = get_record_store().table(WEB_RESULTS_TABLE).insert([_pick(values, WEB_RESULT_FIELDS)]).execute()
    if not rows:
        raise RecordStoreError("Insert into 'web_results' returned no row.")
    return WebResultRecord.from_row(rows[0])


def update_web_result(result_id: str, values: Mapping[str, Any]) -> WebResultRecord:
    rows = (
        get_record_store()
        .table(WEB_RESULTS_TABLE)
        .update(_pick(values, WEB_RESULT_FIELDS))
        .eq("id", result_id)
        .execute()
    )
    if not rows:
        raise RecordStoreError(f"No web result with id={result_id!r}.")
    return WebResultRecord.from_row(rows[0])


def delete_web_result(result_id: str) -> None:
    rows = get_record_store().table(WEB_RESULTS_TABLE).delete().eq("id", result_id).execute()
    if not rows:
        raise RecordStoreError(f"No web result with id={result_id!r}.")
