import logging
import threading

from django.conf import settings
from django.http import JsonResponse

from .errors import RateLimited
from .services.rate_limiter import SlidingWindowRateLimiter

logger = logging.getLogger(__name__)

_limiter = None
_limiter_lock = threading.Lock()


def get_rate_limiter() -> SlidingWindowRateLimiter:
    """Limitador compartido por todo el proceso."""
    global _limiter
    with _limiter_lock:
        if _limiter is None:
            _limiter = SlidingWindowRateLimiter(
                max_requests=settings.RATE_LIMIT_MAX_REQUESTS,
                window_ms=settings.RATE_LIMIT_WINDOW_MS,
            )
        return _limiter


class RateLimitMiddleware:
    """Aplica el límite por IP a todas las rutas."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        client = request.META.get("REMOTE_ADDR") or "unknown"
        try:
            get_rate_limiter().admit(client)
        except RateLimited as e:
            logger.warning("Rejected %s %s from %s", request.method, request.path, client)
            return JsonResponse(e.as_dict(), status=e.status)
        return self.get_response(request)
