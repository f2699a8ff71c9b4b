import logging
from datetime import timedelta
from os import getenv
from pathlib import Path

import firebase_admin
from corsheaders.defaults import default_headers
from dotenv import load_dotenv
from firebase_admin import credentials

logger = logging.getLogger(__name__)

# Paths & env
BASE_DIR = Path(__file__).resolve().parents[2]
load_dotenv(BASE_DIR / ".env")


def _csv(name: str, default: str = "") -> list[str]:
    raw = getenv(name, default)
    return [x.strip() for x in raw.split(",") if x.strip()]


# Core
SECRET_KEY = getenv("DJANGO_SECRET_KEY", "dev-secret")
DEBUG = getenv("DJANGO_DEBUG", "True").lower() == "true"

ALLOWED_HOSTS = (
    _csv("ALLOWED_HOSTS")
    or _csv("DJANGO_ALLOWED_HOSTS", "*" if DEBUG else "")
    or (["*"] if DEBUG else [])
)

# CSRF
CSRF_TRUSTED_ORIGINS = _csv("CSRF_TRUSTED_ORIGINS") or [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

INSTALLED_APPS = [
    # Django
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    # 3rd-party
    "rest_framework",
    "django_filters",
    "drf_spectacular",
    "corsheaders",
    # API
    "api.accounts",
    "api.listings",
    "api.offers",
    "api.sponsors",
    "api.messaging",
    "api.directory",
    "api.memberships",
    "api.catalog",
    "api.dashboard",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "corsheaders.middleware.CorsMiddleware",
    "whitenoise.middleware.WhiteNoiseMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "core.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "core.wsgi.application"
ASGI_APPLICATION = "core.asgi.application"

# Database
if getenv("DATABASE_URL"):
    import dj_database_url

    DATABASES = {
        "default": dj_database_url.parse(
            getenv("DATABASE_URL"),
            conn_max_age=600,
            ssl_require=False,
        )
    }
else:
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.postgresql",
            "NAME": getenv("DB_NAME", "postgres"),
            "USER": getenv("DB_USER", "postgres"),
            "PASSWORD": getenv("DB_PASSWORD", "postgres"),
            "HOST": getenv("DB_HOST", "localhost"),
            "PORT": getenv("DB_PORT", "5432"),
        }
    }

# Passwords / i18n / tz
AUTH_PASSWORD_VALIDATORS = [
    {"NAME": "django.contrib.auth.password_validation.UserAttributeSimilarityValidator"},
    {"NAME": "django.contrib.auth.password_validation.MinimumLengthValidator"},
    {"NAME": "django.contrib.auth.password_validation.CommonPasswordValidator"},
    {"NAME": "django.contrib.auth.password_validation.NumericPasswordValidator"},
]

LANGUAGE_CODE = "tr-tr"
TIME_ZONE = "Europe/Istanbul"
USE_I18N = True
USE_TZ = True

# Static / Media
STATIC_URL = "/static/"
STATIC_ROOT = BASE_DIR / "static"
MEDIA_URL = "/media/"
MEDIA_ROOT = BASE_DIR / "media"

# STORAGES
STORAGES = {
    "default": {"BACKEND": "django.core.files.storage.FileSystemStorage"},
    "staticfiles": {"BACKEND": "whitenoise.storage.CompressedManifestStaticFilesStorage"},
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# DRF / Schema
REST_FRAMEWORK = {
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
    "DEFAULT_AUTHENTICATION_CLASSES": (
        "api.accounts.authentication.AdminTokenAuthentication",
        "api.accounts.authentication.FirebaseAuthentication",
    ),
    "DEFAULT_PERMISSION_CLASSES": ("rest_framework.permissions.AllowAny",),
    "DEFAULT_FILTER_BACKENDS": ("django_filters.rest_framework.DjangoFilterBackend",),
    "UNAUTHENTICATED_USER": None,
    "DEFAULT_THROTTLE_CLASSES": [
        "rest_framework.throttling.AnonRateThrottle",
    ],
    "DEFAULT_THROTTLE_RATES": {
        "anon": "1000/day",
    },
}

SPECTACULAR_SETTINGS = {
    "TITLE": "Nakliyeci Dünyası API",
    "DESCRIPTION": "API docs",
    "VERSION": "1.0.0",
    "ENUM_GENERATE_UNIQUE_NAME": False,
    "ENUM_NAME_OVERRIDES": {
        # Accounts
        "api.accounts.models.UserRole": "UserRoleEnum",
        "api.accounts.models.AdminRole": "AdminRoleEnum",
        # Listings
        "api.listings.choices.FreightType": "FreightTypeEnum",
        # Sponsors
        "api.sponsors.models.EntityType": "SponsorEntityTypeEnum",
        # Directory
        "api.directory.models.NoteType": "NoteTypeEnum",
        # Memberships
        "api.memberships.models.RequestStatus": "MembershipRequestStatusEnum",
    },
    "COMPONENT_SPLIT_REQUEST": True,
    "POSTPROCESSING_HOOKS": [],
}

# Admin token (signed + expiring, simplejwt)
ADMIN_TOKEN_LIFETIME_MIN = int(getenv("ADMIN_TOKEN_LIFETIME_MIN", "480"))
SIMPLE_JWT = {
    "ACCESS_TOKEN_LIFETIME": timedelta(minutes=ADMIN_TOKEN_LIFETIME_MIN),
    "AUTH_HEADER_TYPES": ("Bearer",),
}
ADMIN_BOOTSTRAP_USERNAME = getenv("ADMIN_BOOTSTRAP_USERNAME", "")
ADMIN_BOOTSTRAP_PASSWORD = getenv("ADMIN_BOOTSTRAP_PASSWORD", "")

# Pagination
LISTING_PAGE_SIZE = int(getenv("LISTING_PAGE_SIZE", "6"))
COMPANY_PAGE_SIZE = int(getenv("COMPANY_PAGE_SIZE", "12"))
OFFER_PAGE_SIZE = int(getenv("OFFER_PAGE_SIZE", "10"))
ADMIN_USERS_PAGE_SIZE = int(getenv("ADMIN_USERS_PAGE_SIZE", "20"))
MAX_PAGE_SIZE = int(getenv("MAX_PAGE_SIZE", "100"))

# CORS
CORS_ALLOW_ALL_ORIGINS = False
CORS_ALLOWED_ORIGINS = _csv("CORS_ALLOWED_ORIGINS") or [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]
CORS_ALLOW_CREDENTIALS = True
CORS_PREFLIGHT_MAX_AGE = 86400
CORS_ALLOW_HEADERS = list(default_headers) + ["authorization"]

# Firebase (kimlik doğrulama)
FIREBASE_CREDENTIAL_FILE = Path(
    getenv("FIREBASE_CREDENTIAL_FILE", str(BASE_DIR / "core" / "firebase.json"))
)

try:
    if FIREBASE_CREDENTIAL_FILE.exists() and not firebase_admin._apps:
        cred = credentials.Certificate(FIREBASE_CREDENTIAL_FILE)
        firebase_admin.initialize_app(cred)
except (ValueError, OSError):
    logger.exception("Firebase init error")
