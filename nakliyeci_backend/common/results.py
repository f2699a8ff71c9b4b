from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

from django.db import OperationalError, ProgrammingError

from .utils import extract_index_url

SCHEMA_REMEDIATION = "Şema/dizin eksik: `python manage.py migrate` çalıştırın."


@dataclass
class MutationResult:
    success: bool
    message: str
    not_found: bool = field(default=False, compare=False)

    @classmethod
    def missing(cls, message: str):
        return cls(success=False, message=message, not_found=True)

    def as_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data.pop("not_found")
        return data


@dataclass
class BatchResult(MutationResult):
    added_count: int = 0
    skipped_count: int = 0


@dataclass
class QueryError:
    message: str
    index_url: str | None = None
    remediation: str | None = None

    @classmethod
    def from_exception(cls, exc: Exception, fallback: str) -> QueryError:
        text = str(exc) or fallback
        index_url = extract_index_url(text)
        remediation = None
        if index_url is None and isinstance(exc, (OperationalError, ProgrammingError)):
            lowered = text.lower()
            if "no such table" in lowered or "does not exist" in lowered or "index" in lowered:
                remediation = SCHEMA_REMEDIATION
        return cls(message=text, index_url=index_url, remediation=remediation)

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class Page:
    items: list = field(default_factory=list)
    cursor: str | None = None
    error: QueryError | None = None
