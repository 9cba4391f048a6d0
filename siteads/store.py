"""Record store backends for the ads and web results tables.

Both backends answer the same small table API:

    store.table("ads").select().eq("is_featured", False).limit(4).execute()
    store.table("ads").select().eq("is_featured", True).single()
    store.table("web_results").update({...}).eq("id", result_id).execute()

Any failure (connectivity, bad status, malformed payload, validation, wrong
row count for single()) surfaces as RecordStoreError. Nothing is retried or
cached.
"""

from __future__ import annotations

import datetime
import json
import urllib.error
import urllib.parse
import urllib.request
import uuid
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional

from django.apps import apps
from django.conf import settings
from django.core.exceptions import FieldDoesNotExist, FieldError, ValidationError
from django.db import DatabaseError, transaction

Row = dict[str, Any]


class RecordStoreError(Exception):
    pass


@dataclass
class Query:
    store: "RecordStore"
    table: str
    action: str = "select"
    columns: str = "*"
    filters: list[tuple[str, Any]] = field(default_factory=list)
    ordering: Optional[tuple[str, bool]] = None
    row_limit: Optional[int] = None
    payload: Any = None
    expect_single: bool = False

    def eq(self, column: str, value: Any) -> "Query":
        self.filters.append((column, value))
        return self

    def order(self, column: str, *, ascending: bool = True) -> "Query":
        self.ordering = (column, ascending)
        return self

    def limit(self, count: int) -> "Query":
        self.row_limit = max(0, int(count))
        return self

    def execute(self) -> list[Row]:
        return self.store.run(self)

    def single(self) -> Row:
        """Run the query and return its only row.

        Raises RecordStoreError when zero or more than one row matched.
        """
        self.expect_single = True
        return self.store.run(self)[0]


class Table:
    def __init__(self, store: "RecordStore", name: str):
        self.store = store
        self.name = name

    def select(self, columns: str = "*") -> Query:
        return Query(self.store, self.name, columns=columns)

    def insert(self, rows: Iterable[Mapping[str, Any]]) -> Query:
        return Query(self.store, self.name, action="insert", payload=[dict(row) for row in rows])

    def update(self, values: Mapping[str, Any]) -> Query:
        return Query(self.store, self.name, action="update", payload=dict(values))

    def delete(self) -> Query:
        return Query(self.store, self.name, action="delete")


class RecordStore:
    name: str = ""

    def table(self, name: str) -> Table:
        return Table(self, name)

    def run(self, query: Query) -> list[Row]:
        if query.action in ("update", "delete") and not query.filters:
            raise RecordStoreError(f"Refusing to {query.action} every row of {query.table!r}.")

        rows = self._execute(query)

        if query.expect_single and len(rows) != 1:
            if not rows:
                raise RecordStoreError(f"Expected exactly one {query.table!r} row, found none.")
            raise RecordStoreError(f"Expected exactly one {query.table!r} row, found {len(rows)}.")
        return rows

    def _execute(self, query: Query) -> list[Row]:
        raise NotImplementedError


def get_record_store() -> RecordStore:
    backend = (getattr(settings, "RECORD_STORE_BACKEND", "DJANGO") or "DJANGO").upper()

    if backend == "DJANGO":
        return DjangoRecordStore()
    if backend == "POSTGREST":
        return PostgrestRecordStore(
            base_url=getattr(settings, "SUPABASE_URL", ""),
            api_key=getattr(settings, "SUPABASE_ANON_KEY", ""),
            timeout=getattr(settings, "RECORD_STORE_TIMEOUT", 20),
        )
    raise RecordStoreError(f"Unknown RECORD_STORE_BACKEND={backend!r}")


class DjangoRecordStore(RecordStore):
    """Tables are the siteads models, looked up by their db_table."""

    name = "django"

    def _model(self, table: str):
        for model in apps.get_app_config("siteads").get_models():
            if model._meta.db_table == table:
                return model
        raise RecordStoreError(f"Unknown table {table!r}.")

    def _columns(self, model, columns: str) -> list[str]:
        if columns.strip() == "*":
            return [f.name for f in model._meta.concrete_fields]
        names = [c.strip() for c in columns.split(",") if c.strip()]
        for name in names:
            model._meta.get_field(name)
        return names

    def _to_row(self, obj, columns: list[str]) -> Row:
        row: Row = {}
        for name in columns:
            value = getattr(obj, obj._meta.get_field(name).attname)
            if isinstance(value, uuid.UUID):
                value = str(value)
            elif isinstance(value, (datetime.datetime, datetime.date)):
                value = value.isoformat()
            row[name] = value
        return row

    def _execute(self, query: Query) -> list[Row]:
        model = self._model(query.table)
        try:
            columns = self._columns(model, query.columns)
            if query.action == "insert":
                return self._insert(model, query.payload, columns)

            qs = model.objects.all()
            for column, value in query.filters:
                model._meta.get_field(column)
                qs = qs.filter(**{column: value})

            if query.action == "select":
                if query.ordering:
                    column, ascending = query.ordering
                    model._meta.get_field(column)
                    qs = qs.order_by(column if ascending else f"-{column}")
                if query.row_limit is not None:
                    qs = qs[: query.row_limit]
                return [self._to_row(obj, columns) for obj in qs]
            if query.action == "update":
                return self._update(model, qs, query.payload, columns)
            if query.action == "delete":
                return self._delete(qs, columns)
        except (DatabaseError, FieldDoesNotExist, FieldError, ValidationError, TypeError, ValueError) as e:
            raise RecordStoreError(f"{query.action} on {query.table!r} failed: {e}") from e

        raise RecordStoreError(f"Unsupported action {query.action!r}.")

    def _insert(self, model, rows: list[Row], columns: list[str]) -> list[Row]:
        created = []
        with transaction.atomic():
            for values in rows:
                obj = model(**values)
                obj.full_clean()
                obj.save(force_insert=True)
                created.append(obj)
        return [self._to_row(obj, columns) for obj in created]

    def _update(self, model, qs, values: Row, columns: list[str]) -> list[Row]:
        for column in values:
            if model._meta.get_field(column).primary_key:
                raise RecordStoreError(f"Column {column!r} is immutable.")

        updated = []
        with transaction.atomic():
            for obj in qs.select_for_update():
                for column, value in values.items():
                    setattr(obj, column, value)
                obj.full_clean()
                obj.save()
                updated.append(obj)
        return [self._to_row(obj, columns) for obj in updated]

    def _delete(self, qs, columns: list[str]) -> list[Row]:
        with transaction.atomic():
            rows = [self._to_row(obj, columns) for obj in qs]
            qs.delete()
        return rows


class PostgrestRecordStore(RecordStore):
    """Hosted PostgREST (Supabase) tables over HTTP.

    Notes:
    - Every write asks for the affected rows back (Prefer: return=representation)
      so callers can tell when an id matched nothing.
    - The anon key is sent both as apikey and as the bearer token.
    """

    name = "postgrest"

    METHODS = {
        "select": "GET",
        "insert": "POST",
        "update": "PATCH",
        "delete": "DELETE",
    }

    def __init__(self, *, base_url: str, api_key: str, timeout: int = 20):
        if not base_url:
            raise RecordStoreError("SUPABASE_URL is not configured.")
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout

    def _headers(self, *, write: bool) -> dict[str, str]:
        headers = {
            "apikey": self.api_key,
            "Authorization": f"Bearer {self.api_key}",
            "Accept": "application/json",
        }
        if write:
            headers["Content-Type"] = "application/json"
            headers["Prefer"] = "return=representation"
        return headers

    def _format_value(self, value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if value is None:
            return "null"
        return str(value)

    def _params(self, query: Query) -> list[tuple[str, str]]:
        params: list[tuple[str, str]] = []
        if query.action == "select":
            params.append(("select", query.columns))
        for column, value in query.filters:
            # PostgREST compares against null with "is", not "eq".
            op = "is" if value is None else "eq"
            params.append((column, f"{op}.{self._format_value(value)}"))
        if query.ordering:
            column, ascending = query.ordering
            params.append(("order", f"{column}.{'asc' if ascending else 'desc'}"))
        if query.row_limit is not None:
            params.append(("limit", str(query.row_limit)))
        return params

    def _error_detail(self, err: urllib.error.HTTPError) -> str:
        try:
            body = err.read().decode("utf-8")
        except (OSError, AttributeError):
            return str(err.reason or "")
        try:
            payload = json.loads(body)
        except ValueError:
            return body.strip()[:200]
        if isinstance(payload, dict):
            return str(payload.get("message") or payload.get("hint") or "")
        return ""

    def _execute(self, query: Query) -> list[Row]:
        method = self.METHODS.get(query.action)
        if method is None:
            raise RecordStoreError(f"Unsupported action {query.action!r}.")

        url = f"{self.base_url}/rest/v1/{urllib.parse.quote(query.table)}"
        params = self._params(query)
        if params:
            url = f"{url}?{urllib.parse.urlencode(params)}"

        data = None
        if query.action in ("insert", "update"):
            data = json.dumps(query.payload, default=str).encode("utf-8")

        req = urllib.request.Request(
            url,
            data=data,
            headers=self._headers(write=query.action != "select"),
            method=method,
        )
        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as resp:
                raw = resp.read().decode("utf-8")
        except urllib.error.HTTPError as e:
            raise RecordStoreError(
                f"{query.action} on {query.table!r} failed: HTTP {e.code} {self._error_detail(e)}".rstrip()
            ) from e
        except OSError as e:
            # URLError, timeouts and refused connections all land here.
            raise RecordStoreError(f"{query.action} on {query.table!r} failed: {e}") from e

        if not raw.strip():
            return []
        try:
            payload = json.loads(raw)
        except ValueError as e:
            raise RecordStoreError(f"Malformed response from {query.table!r}.") from e

        if isinstance(payload, dict):
            payload = [payload]
        if not isinstance(payload, list) or not all(isinstance(row, dict) for row in payload):
            raise RecordStoreError(f"Malformed response from {query.table!r}.")
        return payload
