import re

from unidecode import unidecode

TR_ALPHABET = "abcçdefgğhıijklmnoöpqrsştuüvwxyz"
KEY_WIDTH = 2
# 00 ayraç, 01-10 rakamlar, 11-42 harfler
_SEPARATOR = "00"
_RANK = {str(d): f"{d + 1:02d}" for d in range(10)}
_RANK.update({ch: f"{i + 11:02d}" for i, ch in enumerate(TR_ALPHABET)})

INDEX_URL_RE = re.compile(r"https://console\.firebase\.google\.com/\S+|https?://\S*indexes\S*")


def turkish_lower(value: str) -> str:
    if not value:
        return ""
    return value.replace("I", "ı").replace("İ", "i").lower()


def turkish_sort_key(value: str) -> str:
    """
    Türk alfabesi sırasını (c < ç < d, o < ö < p, ı < i) kodlayan anahtar.
    Her karakter iki rakama karşılık gelir; anahtar yalnızca rakamlardan
    oluştuğu için sırası veritabanı harmanlamasından (collation) bağımsızdır.
    Veritabanında ismin yanında saklanır.
    """
    out = []
    for ch in turkish_lower((value or "").strip()):
        if ch in _RANK:
            out.append(_RANK[ch])
            continue
        for sub in unidecode(ch).lower():
            if sub in _RANK:
                out.append(_RANK[sub])
            elif sub.isspace() or not sub.isalnum():
                out.append(_SEPARATOR)
    return "".join(out)


def key_contains(key: str, part: str) -> bool:
    """`part` anahtarın içinde bir karakter sınırında başlıyor mu."""
    start = key.find(part)
    while start != -1:
        if start % KEY_WIDTH == 0:
            return True
        start = key.find(part, start + 1)
    return False


def slugify_tr(value: str) -> str:
    latin = unidecode(turkish_lower(value or ""))
    return re.sub(r"[^a-z0-9]+", "-", latin).strip("-")


def extract_index_url(text: str) -> str | None:
    match = INDEX_URL_RE.search(text or "")
    return match.group(0) if match else None
