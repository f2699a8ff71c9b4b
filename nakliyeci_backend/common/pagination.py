"""
Cursor (keyset) sayfalama.

Her çağrı tek bir sorgu çalıştırır: sıralama alanı + birincil anahtar üzerinden
"son görülen kaydın ardından başla" koşulu ve `LIMIT page_size`.
Cursor, sayfanın son satırının (değer, pk) çiftini taşıyan opak bir token'dır.
"""
from __future__ import annotations

import base64
import binascii
import json
import logging
from datetime import date, datetime

from django.core.exceptions import ValidationError
from django.db import DatabaseError
from django.db.models import Q

from .results import Page, QueryError

logger = logging.getLogger(__name__)


class CursorError(ValueError):
    pass


def _dump(value):
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    return str(value)


def encode_cursor(obj, order_field: str) -> str:
    payload = {"v": _dump(getattr(obj, order_field)), "pk": _dump(obj.pk)}
    raw = json.dumps(payload, separators=(",", ":")).encode()
    return base64.urlsafe_b64encode(raw).decode("ascii")


def decode_cursor(cursor: str, model, order_field: str):
    try:
        raw = base64.urlsafe_b64decode(cursor.encode("ascii"))
        payload = json.loads(raw)
        field = model._meta.get_field(order_field)
        value = field.to_python(payload["v"])
        pk = model._meta.pk.to_python(payload["pk"])
    except (binascii.Error, UnicodeError, ValueError, KeyError, TypeError, ValidationError) as e:
        raise CursorError("Geçersiz sayfa imleci.") from e
    return value, pk


def start_after(qs, order_field: str, descending: bool, value, pk):
    op = "lt" if descending else "gt"
    return qs.filter(
        Q(**{f"{order_field}__{op}": value}) | Q(**{order_field: value, f"pk__{op}": pk})
    )


def fetch_page(
    queryset,
    *,
    order_field: str,
    descending: bool = True,
    page_size: int,
    cursor: str | None = None,
    label: str = "kayıtlar",
) -> Page:
    if not isinstance(page_size, int) or isinstance(page_size, bool) or page_size < 1:
        return Page(error=QueryError(message="Sayfa boyutu pozitif bir tam sayı olmalıdır."))

    prefix = "-" if descending else ""
    qs = queryset.order_by(f"{prefix}{order_field}", f"{prefix}pk")

    if cursor:
        try:
            value, pk = decode_cursor(cursor, queryset.model, order_field)
        except CursorError as e:
            logger.warning("Invalid cursor for %s: %r", label, cursor)
            return Page(error=QueryError(message=str(e)))
        qs = start_after(qs, order_field, descending, value, pk)

    try:
        items = list(qs[:page_size])
    except DatabaseError as e:
        logger.exception("Error fetching %s page", label)
        return Page(error=QueryError.from_exception(e, f"{label} yüklenirken bir hata oluştu."))

    next_cursor = encode_cursor(items[-1], order_field) if len(items) == page_size else None
    return Page(items=items, cursor=next_cursor)
