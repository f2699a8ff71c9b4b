"""
Ortak yardımcıların testleri: Türkçe sıralama, cursor sayfalama, dönüştürücüler.
"""
from datetime import date, datetime
from datetime import timezone as dt_timezone

import pytest
from django.db import OperationalError

from api.accounts.models import UserProfile
from common.converters import coerce_datetime, default_true, to_iso_date, to_iso_datetime
from common.pagination import decode_cursor, encode_cursor, fetch_page
from common.results import SCHEMA_REMEDIATION, MutationResult, QueryError
from common.utils import key_contains, slugify_tr, turkish_sort_key


class TestTurkishSortKey:
    def test_dotted_letters_follow_turkish_alphabet(self):
        words = ["Çorlu", "Zonguldak", "Cide", "Ödemiş", "Ordu", "İzmir", "Iğdır", "Dalaman"]
        ordered = sorted(words, key=turkish_sort_key)
        assert ordered == ["Cide", "Çorlu", "Dalaman", "Iğdır", "İzmir", "Ordu", "Ödemiş", "Zonguldak"]

    def test_case_insensitive(self):
        assert turkish_sort_key("İSTANBUL") == turkish_sort_key("istanbul")

    def test_key_is_digits_only(self):
        for word in ["Zeytin Lojistik", "Yıldız Nakliyat", "Ümit Nakliye", "A1 Taşımacılık"]:
            key = turkish_sort_key(word)
            assert key.isdigit()
            assert len(key) % 2 == 0

    def test_letters_after_u_keep_alphabet_order(self):
        words = ["Zeytin Lojistik", "Ümit Nakliye", "Yıldız Nakliyat", "Vatan Kargo", "Uğur Nakliyat"]
        ordered = sorted(words, key=turkish_sort_key)
        assert ordered == ["Uğur Nakliyat", "Ümit Nakliye", "Vatan Kargo", "Yıldız Nakliyat", "Zeytin Lojistik"]

    def test_shorter_name_sorts_first(self):
        assert turkish_sort_key("Ege") < turkish_sort_key("Ege Nakliyat") < turkish_sort_key("Egeli")

    def test_key_contains_respects_character_boundaries(self):
        key = turkish_sort_key("bc")
        assert key_contains(key, turkish_sort_key("c"))
        # "bc" kodunun ortasındaki iki hane "ı" harfinin koduyla aynı
        assert turkish_sort_key("ı") in key
        assert not key_contains(key, turkish_sort_key("ı"))

    def test_empty(self):
        assert turkish_sort_key("") == ""
        assert turkish_sort_key(None) == ""

    def test_slugify(self):
        assert slugify_tr("Gümrük Müşaviri") == "gumruk-musaviri"
        assert slugify_tr("Evden Eve Nakliyat") == "evden-eve-nakliyat"


class TestConverters:
    def test_iso_string_passthrough(self):
        assert to_iso_datetime("2024-03-01T10:00:00Z") == "2024-03-01T10:00:00Z"

    def test_provider_timestamp_dict(self):
        value = {"_seconds": 1704067200, "_nanoseconds": 0}
        assert to_iso_datetime(value) == "2024-01-01T00:00:00Z"

    def test_object_with_to_datetime(self):
        class Stamp:
            def to_datetime(self):
                return datetime(2024, 5, 6, 7, 8, 9, tzinfo=dt_timezone.utc)

        assert to_iso_datetime(Stamp()) == "2024-05-06T07:08:09Z"

    def test_date_only(self):
        assert coerce_datetime("2024-02-03") == datetime(2024, 2, 3, tzinfo=dt_timezone.utc)
        assert to_iso_date(date(2024, 2, 3)) == "2024-02-03"

    def test_missing_required_defaults_to_now(self):
        assert to_iso_datetime(None) is not None

    def test_missing_optional_is_none(self):
        assert to_iso_datetime(None, required=False) is None
        assert to_iso_date("not a date", required=False) is None

    def test_unparsable_does_not_raise(self):
        assert coerce_datetime("dün akşam") is None

    def test_default_true(self):
        assert default_true(None) is True
        assert default_true(False) is False
        assert default_true(True) is True


class TestResults:
    def test_missing_flag_not_serialized(self):
        result = MutationResult.missing("Bulunamadı.")
        assert result.not_found is True
        assert result.as_dict() == {"success": False, "message": "Bulunamadı."}

    def test_index_url_extracted(self):
        exc = Exception(
            "The query requires an index. https://console.firebase.google.com/project/x/indexes?create=1"
        )
        error = QueryError.from_exception(exc, "hata")
        assert error.index_url.startswith("https://console.firebase.google.com/")
        assert error.remediation is None

    def test_missing_table_remediation(self):
        error = QueryError.from_exception(OperationalError("no such table: listings"), "hata")
        assert error.index_url is None
        assert error.remediation == SCHEMA_REMEDIATION

    def test_fallback_message(self):
        assert QueryError.from_exception(Exception(), "Yedek mesaj.").message == "Yedek mesaj."


@pytest.mark.django_db
class TestFetchPage:
    @pytest.fixture
    def companies(self, make_company):
        names = ["Zirve", "Çınar", "Akın", "Cemre", "Öz", "Ova", "Doğan"]
        return [make_company(f"u{i}", name) for i, name in enumerate(names)]

    def test_pages_follow_cursor_without_overlap(self, companies):
        qs = UserProfile.objects.all()
        seen = []
        cursor = None
        for _ in range(10):
            page = fetch_page(qs, order_field="sort_name", descending=False, page_size=3, cursor=cursor)
            assert page.error is None
            seen.extend(p.company_title for p in page.items)
            cursor = page.cursor
            if cursor is None:
                break
        assert seen == ["Akın", "Cemre", "Çınar", "Doğan", "Ova", "Öz", "Zirve"]

    def test_exact_multiple_ends_with_empty_page(self, companies):
        qs = UserProfile.objects.all()
        page = fetch_page(qs, order_field="sort_name", descending=False, page_size=7)
        assert len(page.items) == 7
        assert page.cursor is not None
        last = fetch_page(qs, order_field="sort_name", descending=False, page_size=7, cursor=page.cursor)
        assert last.items == []
        assert last.cursor is None

    def test_invalid_page_size(self, companies):
        page = fetch_page(UserProfile.objects.all(), order_field="sort_name", page_size=0)
        assert page.items == []
        assert page.error is not None

    def test_garbage_cursor(self, companies):
        page = fetch_page(
            UserProfile.objects.all(), order_field="sort_name", page_size=3, cursor="%%%bozuk"
        )
        assert page.items == []
        assert page.error.message == "Geçersiz sayfa imleci."

    def test_cursor_roundtrip(self, companies):
        obj = companies[0]
        value, pk = decode_cursor(encode_cursor(obj, "created_at"), UserProfile, "created_at")
        assert value == obj.created_at
        assert pk == obj.pk
