import logging
import subprocess
from typing import Callable, List, Optional, Sequence

from ..errors import QueryFailed, ScanFailed
from ..models import ConnectedNetwork, WiFiNetwork
from .text_records import (
    DIGITS,
    extract_fields,
    int_or,
    label_field,
    parse_blocks,
    text_or,
)

logger = logging.getLogger(__name__)

NETWORKS_COMMAND = ["netsh", "wlan", "show", "networks", "mode=bssid"]
INTERFACES_COMMAND = ["netsh", "wlan", "show", "interfaces"]

# Columna de cabecera que a veces se cuela como SSID
HEADER_TOKEN = "SSID"

CommandRunner = Callable[[Sequence[str], float], str]

# `netsh wlan show networks mode=bssid`: "SSID 1 : Casa"
NETWORK_FIELDS = [
    label_field("ssid", r"SSID[ \t]+\d+"),
    label_field("signal", "Signal", DIGITS, suffix="%"),
    label_field("type", "Network type"),
    label_field("authentication", "Authentication"),
    label_field("encryption", "Encryption"),
]

# `netsh wlan show interfaces`: "SSID : Casa" (sin número, distinto de BSSID)
INTERFACE_FIELDS = [
    label_field("ssid", "SSID"),
    label_field("signal", "Signal", DIGITS, suffix="%"),
    label_field("channel", "Channel", DIGITS),
    label_field("radio_type", "Radio type"),
    label_field("authentication", "Authentication"),
    label_field("encryption", "Encryption"),
]


def run_command(cmd: Sequence[str], timeout: float) -> str:
    return subprocess.check_output(
        list(cmd), text=True, encoding="utf-8", errors="ignore", timeout=timeout
    )


class WiFiAnalyzer:
    """Analiza redes WiFi a partir de la salida de ``netsh wlan``.

    El ejecutor de comandos es inyectable: el parseo no depende de cómo ni
    dónde se lanzan los comandos.
    """

    def __init__(self, timeout: float = 8, runner: Optional[CommandRunner] = None):
        self.timeout = timeout
        self.runner = runner or run_command

    def _run(self, cmd: Sequence[str], error_cls) -> str:
        try:
            return self.runner(cmd, self.timeout)
        except (subprocess.SubprocessError, OSError) as e:
            logger.error("WiFi command %r failed: %s", " ".join(cmd), e)
            raise error_cls(str(e)) from e

    def get_available_networks(self) -> List[WiFiNetwork]:
        networks_out = self._run(NETWORKS_COMMAND, ScanFailed)
        interfaces_out = self._run(INTERFACES_COMMAND, ScanFailed)
        connected_ssid = connected_ssid_from(interfaces_out)
        return parse_networks(networks_out, connected_ssid)

    def get_connected_info(self) -> Optional[ConnectedNetwork]:
        """Red asociada actualmente, o None si no hay conexión."""
        raw = self._run(INTERFACES_COMMAND, QueryFailed)
        return parse_connected(raw)


def connected_ssid_from(interfaces_out: str) -> Optional[str]:
    ssid = extract_fields(interfaces_out, INTERFACE_FIELDS[:1])["ssid"]
    return ssid or None


def parse_networks(networks_out: str, connected_ssid: Optional[str] = None) -> List[WiFiNetwork]:
    networks: List[WiFiNetwork] = []
    for rec in parse_blocks(networks_out, NETWORK_FIELDS):
        ssid = rec["ssid"]
        if not ssid or ssid == HEADER_TOKEN:
            continue
        networks.append(WiFiNetwork(
            ssid=ssid,
            signal_percent=int_or(rec["signal"]),
            network_type=text_or(rec["type"]),
            authentication=text_or(rec["authentication"]),
            encryption=text_or(rec["encryption"]),
            connected=ssid == connected_ssid,
        ))
    return networks


def parse_connected(raw: str) -> Optional[ConnectedNetwork]:
    rec = extract_fields(raw, INTERFACE_FIELDS)
    if not rec["ssid"]:
        return None
    return ConnectedNetwork(
        ssid=rec["ssid"],
        signal_percent=int_or(rec["signal"]),
        channel=int_or(rec["channel"]),
        radio_type=text_or(rec["radio_type"]),
        authentication=text_or(rec["authentication"]),
        encryption=text_or(rec["encryption"]),
    )
