import logging
import threading
import time
from collections import deque
from typing import Deque, Dict, Optional

from ..errors import RateLimited

logger = logging.getLogger(__name__)


def now_ms() -> float:
    return time.time() * 1000


class SlidingWindowRateLimiter:
    """Limita las peticiones por cliente dentro de una ventana deslizante.

    Cada cliente (una cadena opaca, normalmente la IP) guarda las marcas de
    tiempo de sus peticiones recientes. En cada llamada se purgan las marcas
    caducadas de todos los clientes antes de contar. No es un token bucket:
    se permiten ráfagas hasta el límite en cualquier punto de la ventana.
    """

    def __init__(self, max_requests: int = 60, window_ms: float = 60000):
        self.max_requests = max_requests
        self.window_ms = window_ms
        self._hits: Dict[str, Deque[float]] = {}
        self._lock = threading.Lock()

    def admit(self, client: str, now: Optional[float] = None) -> None:
        """Registra la petición de ``client`` o lanza :class:`RateLimited`."""
        now = now_ms() if now is None else now
        window_start = now - self.window_ms
        with self._lock:
            self._purge(window_start)
            hits = self._hits.get(client)
            count = sum(1 for ts in hits if window_start <= ts <= now) if hits else 0
            if count >= self.max_requests:
                logger.debug("Rate limit hit for %s (%d requests in window)", client, count)
                raise RateLimited()
            self._hits.setdefault(client, deque()).append(now)

    def _purge(self, window_start: float) -> None:
        for client in list(self._hits):
            hits = self._hits[client]
            while hits and hits[0] < window_start:
                hits.popleft()
            if not hits:
                del self._hits[client]

    def tracked_clients(self) -> int:
        with self._lock:
            return len(self._hits)

    def reset(self) -> None:
        with self._lock:
            self._hits.clear()
