from .base import *  # noqa: F403


# helpers
def env_bool(name: str, default: bool = False) -> bool:
    v = getenv(name)  # noqa: F405
    if v is None:
        return default
    return v.strip().lower() in {"1", "true", "t", "yes", "y", "on"}


def _csv(name: str) -> list[str]:
    return [x.strip() for x in getenv(name, "").split(",") if x.strip()]  # noqa: F405


# --- temel ---
DEBUG = env_bool("DJANGO_DEBUG", False)
ALLOWED_HOSTS = _csv("ALLOWED_HOSTS") or ["nakliyecidunyasi.com"]  # noqa: F405

# CORS / CSRF
CORS_ALLOW_ALL_ORIGINS = env_bool("CORS_ALLOW_ALL_ORIGINS", False)
CORS_ALLOWED_ORIGINS = _csv("CORS_ALLOWED_ORIGINS")
CSRF_TRUSTED_ORIGINS = _csv("CSRF_TRUSTED_ORIGINS")

# --- ters proxy arkasında güvenlik (nginx / LB) ---
SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
SECURE_SSL_REDIRECT = env_bool("SECURE_SSL_REDIRECT", True)
SESSION_COOKIE_SECURE = env_bool("SESSION_COOKIE_SECURE", True)
CSRF_COOKIE_SECURE = env_bool("CSRF_COOKIE_SECURE", True)
SESSION_COOKIE_SAMESITE = "Lax"
CSRF_COOKIE_SAMESITE = "Lax"

SECURE_HSTS_SECONDS = int(getenv("SECURE_HSTS_SECONDS", "31536000"))  # noqa: F405
SECURE_HSTS_INCLUDE_SUBDOMAINS = env_bool("SECURE_HSTS_INCLUDE_SUBDOMAINS", True)
SECURE_HSTS_PRELOAD = env_bool("SECURE_HSTS_PRELOAD", True)
SECURE_REFERRER_POLICY = "same-origin"
X_FRAME_OPTIONS = "DENY"

# --- Swagger/Schema erişimi ---
OPEN_API_PUBLIC = env_bool("OPEN_API_PUBLIC", False)
SPECTACULAR_SETTINGS.update({  # noqa: F405
    "SERVE_PERMISSIONS": (
        ["rest_framework.permissions.AllowAny"]
        if OPEN_API_PUBLIC
        else ["common.permissions.IsAdmin"]
    ),
})

# --- stdout/stderr loglama (konteynerler için) ---
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {"console": {"class": "logging.StreamHandler", "formatter": "plain"}},
    "root": {"handlers": ["console"], "level": "WARNING"},
    "loggers": {
        "api": {"handlers": ["console"], "level": "INFO", "propagate": False},
        "common": {"handlers": ["console"], "level": "INFO", "propagate": False},
        "django.request": {"handlers": ["console"], "level": "WARNING", "propagate": False},
        "django.security": {"handlers": ["console"], "level": "WARNING", "propagate": False},
    },
}
