import logging

from django.conf import settings
from django.http import JsonResponse
from django.utils import timezone
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_POST

from .errors import DiagnosticsError
from .services.network_scanner import NetworkScanner
from .services.speed_test import SpeedTester
from .services.wifi_analyzer import WiFiAnalyzer

logger = logging.getLogger(__name__)


def _error_response(e: DiagnosticsError) -> JsonResponse:
    return JsonResponse(e.as_dict(), status=e.status)


def _wifi_analyzer() -> WiFiAnalyzer:
    return WiFiAnalyzer(timeout=settings.WIFI_COMMAND_TIMEOUT)


@require_GET
def network_info(request):
    scanner = NetworkScanner()
    try:
        interfaces = scanner.get_interfaces()
    except DiagnosticsError as e:
        # Sin detalles: solo el mensaje público
        return JsonResponse({"error": e.message}, status=e.status)
    return JsonResponse({
        name: [a.to_dict() for a in addrs]
        for name, addrs in interfaces.items()
    })


@csrf_exempt
@require_POST
def speed_test(request):
    tester = SpeedTester(
        sources=settings.SPEED_TEST_SOURCES,
        timeout=settings.SPEED_TEST_TIMEOUT,
    )
    try:
        report = tester.run_test()
    except DiagnosticsError as e:
        logger.error("Speed test error: %s", e)
        return _error_response(e)
    return JsonResponse(report.to_dict())


@require_GET
def health(request):
    return JsonResponse({"status": "ok", "timestamp": timezone.now().isoformat()})


@require_GET
def wifi_networks(request):
    try:
        networks = _wifi_analyzer().get_available_networks()
    except DiagnosticsError as e:
        logger.error("Error fetching WiFi networks: %s", e)
        return _error_response(e)
    return JsonResponse([n.to_dict() for n in networks], safe=False)


@require_GET
def wifi_connected(request):
    try:
        info = _wifi_analyzer().get_connected_info()
    except DiagnosticsError as e:
        logger.error("Error fetching connected WiFi info: %s", e)
        return _error_response(e)
    if info is None:
        return JsonResponse({"error": "Not connected to any WiFi network"}, status=404)
    return JsonResponse(info.to_dict())
