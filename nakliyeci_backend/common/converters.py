"""
Ham kayıt → alan modeli dönüştürücüleri.

Ham kayıt, tipi belirsiz alanlardan oluşan bir sözlüktür (ör. Firestore
dışa aktarımı). Zaman damgaları ISO-8601 dizgelerine çevrilir, eksik alanlar
varsayılanlarla doldurulur. Hatalı değerlerde istisna fırlatılmaz: uyarı
loglanır ve yedek değer kullanılır.
"""
from __future__ import annotations

import logging
from datetime import date, datetime, time
from datetime import timezone as dt_timezone
from typing import Any

from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime
from rest_framework import serializers

logger = logging.getLogger(__name__)


def _aware(value: datetime) -> datetime:
    if timezone.is_naive(value):
        return timezone.make_aware(value, dt_timezone.utc)
    return value


def _from_provider(value) -> datetime | None:
    """Firestore Timestamp türevleri: to_datetime(), {_seconds}, {seconds}."""
    to_dt = getattr(value, "to_datetime", None)
    if callable(to_dt):
        return _aware(to_dt())
    if isinstance(value, dict):
        seconds = value.get("_seconds", value.get("seconds"))
        nanos = value.get("_nanoseconds", value.get("nanos", value.get("nanoseconds", 0)))
        if isinstance(seconds, (int, float)):
            return datetime.fromtimestamp(seconds + (nanos or 0) / 1e9, tz=dt_timezone.utc)
    return None


def _parse_str(value: str) -> datetime | None:
    value = value.strip()
    if not value:
        return None
    try:
        dt = parse_datetime(value.replace("Z", "+00:00"))
    except ValueError:
        dt = None
    if dt is not None:
        return _aware(dt)
    try:
        d = parse_date(value)
    except ValueError:
        d = None
    if d is not None:
        return datetime.combine(d, time.min, tzinfo=dt_timezone.utc)
    return None


def coerce_datetime(value, *, field: str = "", record_id: str = "") -> datetime | None:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return _aware(value)
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=dt_timezone.utc)
    if isinstance(value, str):
        dt = _parse_str(value)
    else:
        dt = _from_provider(value)
    if dt is None:
        logger.warning("Record %s: unusable %s value %r", record_id or "?", field or "?", value)
    return dt


def _iso(dt: datetime) -> str:
    return dt.astimezone(dt_timezone.utc).isoformat().replace("+00:00", "Z")


def to_iso_datetime(value, *, field: str = "", record_id: str = "", required: bool = True) -> str | None:
    dt = coerce_datetime(value, field=field, record_id=record_id)
    if dt is not None:
        return _iso(dt)
    if required:
        if value is None:
            logger.warning("Record %s: %s missing, defaulting to now", record_id or "?", field or "?")
        return _iso(timezone.now())
    return None


def to_iso_date(value, *, field: str = "", record_id: str = "", required: bool = True) -> str | None:
    dt = coerce_datetime(value, field=field, record_id=record_id)
    if dt is not None:
        return dt.date().isoformat()
    if required:
        return timezone.now().date().isoformat()
    return None


def default_true(value) -> bool:
    if value is None:
        return True
    return bool(value)


# ======================
# DECLARATIVE SCHEMA
# ======================


class Spec:
    def __init__(self, source: str, target: str | None = None, default: Any = None):
        self.source = source
        self.target = target or source
        self.default = default

    def convert(self, raw: dict, record_id: str):
        value = raw.get(self.source)
        return self.default if value is None else value


class Text(Spec):
    def __init__(self, source, target=None, default: str | None = ""):
        super().__init__(source, target, default)

    def convert(self, raw, record_id):
        value = raw.get(self.source)
        if value is None or value == "":
            return self.default
        return str(value)


class Number(Spec):
    def __init__(self, source, target=None, default=None):
        super().__init__(source, target, default)

    def convert(self, raw, record_id):
        value = raw.get(self.source)
        if isinstance(value, bool) or value is None:
            return self.default
        if isinstance(value, (int, float)):
            return value
        try:
            return float(value)
        except (TypeError, ValueError):
            logger.warning("Record %s: %s is not a number: %r", record_id, self.source, value)
            return self.default


class Flag(Spec):
    def __init__(self, source, target=None, default: bool = True):
        super().__init__(source, target, default)

    def convert(self, raw, record_id):
        value = raw.get(self.source)
        if isinstance(value, bool):
            return value
        return self.default


class Items(Spec):
    def __init__(self, source, target=None):
        super().__init__(source, target, None)

    def convert(self, raw, record_id):
        value = raw.get(self.source)
        return [v for v in value if v not in (None, "")] if isinstance(value, list) else []


class Choice(Spec):
    def __init__(self, source, choices, target=None, default=None):
        super().__init__(source, target, default)
        self.choices = set(choices)

    def convert(self, raw, record_id):
        value = raw.get(self.source)
        return value if value in self.choices else self.default


class Timestamp(Spec):
    def __init__(self, source, target=None, required: bool = True):
        super().__init__(source, target, None)
        self.required = required

    def convert(self, raw, record_id):
        return to_iso_datetime(
            raw.get(self.source), field=self.source, record_id=record_id, required=self.required
        )


class Day(Timestamp):
    def convert(self, raw, record_id):
        return to_iso_date(
            raw.get(self.source), field=self.source, record_id=record_id, required=self.required
        )


class RecordSchema:
    def __init__(self, name: str, *fields: Spec):
        self.name = name
        self.fields = fields

    def convert(self, raw: dict | None, record_id: str) -> dict:
        raw = raw if isinstance(raw, dict) else {}
        out = {f.target: f.convert(raw, record_id) for f in self.fields}
        out["id"] = record_id
        return out


# ======================
# DRF FIELDS
# ======================


class IsoDateTimeField(serializers.DateTimeField):
    """Çıktıda her zaman ISO-8601 (UTC, `Z`) üretir."""

    def __init__(self, *args, required_value: bool = True, **kwargs):
        self.required_value = required_value
        super().__init__(*args, **kwargs)

    def to_representation(self, value):
        return to_iso_datetime(
            value, field=self.field_name or "", required=self.required_value
        )


class DefaultTrueBooleanField(serializers.BooleanField):
    def __init__(self, **kwargs):
        kwargs.setdefault("required", False)
        super().__init__(**kwargs)

    def to_representation(self, value):
        return default_true(value)
