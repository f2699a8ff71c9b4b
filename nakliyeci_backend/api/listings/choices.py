from django.db.models import TextChoices


class FreightType(TextChoices):
    COMMERCIAL = "Ticari", "Ticari"
    RESIDENTIAL = "Evden Eve", "Evden Eve"
    EMPTY_VEHICLE = "Boş Araç", "Boş Araç"


class CargoType(TextChoices):
    FOOD = "Gıda", "Gıda"
    INDUSTRIAL = "Sanayi Üretimi", "Sanayi Üretimi"
    CONSTRUCTION = "İnşaat Malzemeleri", "İnşaat Malzemeleri"
    TEXTILE = "Tekstil", "Tekstil"
    LIGHT = "Hafif Tonajlı Yük", "Hafif Tonajlı Yük"
    OTHER = "Diğer", "Diğer"


class LoadingType(TextChoices):
    FULL = "Komple", "Komple"
    PARTIAL = "Parsiyel", "Parsiyel"
    TONNAGE = "Tonajlı", "Tonajlı"


class CargoForm(TextChoices):
    PALLET = "Paletli", "Paletli"
    BOX = "Kolili", "Kolili"
    BALE = "Balya", "Balya"
    COIL = "Bobin", "Bobin"
    OTHER = "Diğer", "Diğer"


class WeightUnit(TextChoices):
    TON = "Ton", "Ton"
    KG = "Kg", "Kg"
    M3 = "M³ (metreküp)", "M³ (metreküp)"


class ShipmentScope(TextChoices):
    DOMESTIC = "Yurt İçi", "Yurt İçi"
    INTERNATIONAL = "Yurt Dışı", "Yurt Dışı"


class ResidentialTransportType(TextChoices):
    INTERNATIONAL = "Uluslararası Taşımacılık", "Uluslararası Taşımacılık"
    INTERCITY = "Şehirlerarası Taşımacılık", "Şehirlerarası Taşımacılık"
    OFFICE = "Ofis Taşımacılığı", "Ofis Taşımacılığı"
    FACTORY = "Fabrika Taşımacılığı", "Fabrika Taşımacılığı"
    FAIR = "Fuar Taşımacılığı", "Fuar Taşımacılığı"
    OTHER = "Diğer", "Diğer"


class ResidentialPlaceType(TextChoices):
    HOME = "Ev", "Ev"
    WORKPLACE = "İş Yeri", "İş Yeri"
    MATERIAL = "Malzeme", "Malzeme"


class ElevatorStatus(TextChoices):
    NONE = "Asansör Yok", "Asansör Yok"
    LOADING = "Yükleme Adresinde Var", "Yükleme Adresinde Var"
    UNLOADING = "Boşaltma Adresinde Var", "Boşaltma Adresinde Var"
    BOTH = "Her İkisinde de Var", "Her İkisinde de Var"


class FloorLevel(TextChoices):
    GROUND = "Giriş Kat", "Giriş Kat"
    FIRST = "1’nci Kat", "1’nci Kat"
    SECOND = "2’nci Kat", "2’nci Kat"
    THIRD = "3’ncü Kat", "3’ncü Kat"
    FOURTH = "4’ncü Kat", "4’ncü Kat"
    FIFTH_PLUS = "5’nci Kat ve Üzeri", "5’nci Kat ve Üzeri"


VEHICLES_NEEDED = [
    "10 Teker Kamyon",
    "120 M3 Kamyon Römork",
    "13.60 Açık Tır",
    "13.60 Kapalı Tır",
    "Çekici",
    "Açık Kamyon",
    "Açık ve Kapalı Tır",
    "Adr’li Tır",
    "Araç Farketmez",
    "Düz Tenteli",
    "Damper Dorse",
    "Denizyolu",
    "Frigofrig",
    "Havuz Dorse",
    "Isuzu",
    "Kırk Ayak Kamyon",
    "Kısa Dorse",
    "Kamyon",
    "Kamyon Römork",
    "Kamyonet",
    "Kayar Perde Kayar Çatı",
    "Konteyner",
    "Konteyner (20'lik)",
    "Konteyner (40'lık)",
    "Konteyner (45'lik)",
    "Kuru Yük Gemisi",
    "Lowbed",
    "Mega Araç",
    "Midilli",
    "Minivan",
    "Oto Taşıma",
    "Panelvan",
    "Proje Yükü",
    "Römork Tır",
    "Sal Kasa Dorse",
    "Tanker",
    "Tenteli Kamyon",
    "Tenteli Minivan",
    "Tenteli Tır",
    "Tenteli Tır ya da Frigofirik Tır",
    "Yanıcılı Araç",
]
