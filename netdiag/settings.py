import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def _env_list(name, default):
    raw = os.environ.get(name, default)
    return [v.strip() for v in raw.split(",") if v.strip()]


# ---- core ----
SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "netdiag-dev-insecure-key")
DEBUG = os.environ.get("DJANGO_DEBUG", "1").strip().lower() not in ("0", "false", "no")
ALLOWED_HOSTS = _env_list("ALLOWED_HOSTS", "localhost,127.0.0.1,0.0.0.0")

# runserver sin argumentos escucha en HOST:PORT
HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "3001"))

INSTALLED_APPS = [
    "corsheaders",
    "diagnostics",
]

MIDDLEWARE = [
    "corsheaders.middleware.CorsMiddleware",
    "django.middleware.security.SecurityMiddleware",
    "diagnostics.middleware.RateLimitMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "netdiag.urls"
WSGI_APPLICATION = "netdiag.wsgi.application"

# Nada se persiste
DATABASES = {}

USE_TZ = True
TIME_ZONE = "UTC"

SECURE_CONTENT_TYPE_NOSNIFF = True
SECURE_REFERRER_POLICY = "no-referrer"
X_FRAME_OPTIONS = "DENY"

# ---- cors ----
FRONTEND_URL = os.environ.get("FRONTEND_URL", "http://localhost:3000")
CORS_ALLOWED_ORIGINS = _env_list("CORS_ORIGIN", FRONTEND_URL)
CORS_ALLOW_METHODS = ["GET", "POST"]
CORS_ALLOW_HEADERS = ["content-type"]
CORS_ALLOW_CREDENTIALS = True

# ---- rate limiting ----
RATE_LIMIT_WINDOW_MS = int(os.environ.get("RATE_LIMIT_WINDOW_MS", "60000"))
RATE_LIMIT_MAX_REQUESTS = int(os.environ.get("RATE_LIMIT_MAX_REQUESTS", "60"))

# ---- speed test ----
# Varios ficheros pequeños de CDN para promediar
SPEED_TEST_SOURCES = _env_list(
    "SPEED_TEST_SOURCES",
    ",".join([
        "https://cdn.jsdelivr.net/npm/bootstrap@5.3.2/dist/css/bootstrap.min.css",
        "https://cdn.jsdelivr.net/npm/jquery@3.7.1/dist/jquery.min.js",
        "https://cdn.jsdelivr.net/npm/axios@1.6.7/dist/axios.min.js",
    ]),
)
SPEED_TEST_TIMEOUT = float(os.environ.get("SPEED_TEST_TIMEOUT", "10"))

# ---- wifi ----
WIFI_COMMAND_TIMEOUT = float(os.environ.get("WIFI_COMMAND_TIMEOUT", "8"))

# ---- logging ----
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "plain",
        },
    },
    "loggers": {
        "diagnostics": {
            "handlers": ["console"],
            "level": LOG_LEVEL,
            "propagate": False,
        },
        "django": {
            "handlers": ["console"],
            "level": "INFO",
        },
    },
}
