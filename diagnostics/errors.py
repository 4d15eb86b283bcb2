from typing import Optional


class DiagnosticsError(Exception):
    """Error base del motor de diagnóstico.

    ``message`` es el texto público y estable; ``details`` puede llevar el
    texto crudo del sistema operativo o del transporte.
    """

    message = "Diagnostics operation failed"
    status = 500

    def __init__(self, details: Optional[str] = None):
        super().__init__(details or self.message)
        self.details = details

    def as_dict(self) -> dict:
        body = {"error": self.message}
        if self.details:
            body["details"] = self.details
        return body


# --- Comandos del sistema -------------------------------------------------
class CommandFailed(DiagnosticsError):
    pass


class ScanFailed(CommandFailed):
    message = "Failed to fetch WiFi networks"


class QueryFailed(CommandFailed):
    message = "Failed to fetch connected WiFi information"


class InterfaceQueryFailed(DiagnosticsError):
    message = "Failed to fetch network information"


# --- Speed test -----------------------------------------------------------
class ProbeError(DiagnosticsError):
    message = "Failed to perform speed test"

    def __init__(self, details: Optional[str] = None, url: Optional[str] = None):
        super().__init__(details)
        self.url = url


class ProbeTimedOut(ProbeError):
    message = "Speed test timed out"
    status = 408


class ProbeRejected(ProbeError):

    def __init__(self, status: int, details: Optional[str] = None, url: Optional[str] = None):
        super().__init__(details, url=url)
        self.status = status


class ProbeUnreachable(ProbeError):
    message = "No response received from test server"
    status = 503


class ProbeFailed(ProbeError):
    pass


# --- Rate limiting --------------------------------------------------------
class RateLimited(DiagnosticsError):
    message = "Too many requests"
    status = 429

    def __init__(self, details: Optional[str] = "Please try again later"):
        super().__init__(details)
