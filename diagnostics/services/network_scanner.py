import ipaddress
import logging
import socket
from typing import Dict, List

import psutil

from ..errors import InterfaceQueryFailed
from ..models import InterfaceAddress

logger = logging.getLogger(__name__)

EMPTY_MAC = "00:00:00:00:00:00"

FAMILIES = {
    socket.AF_INET: "IPv4",
    socket.AF_INET6: "IPv6",
}


class NetworkScanner:
    """Clase para listar las interfaces de red locales"""

    def get_interfaces(self) -> Dict[str, List[InterfaceAddress]]:
        """Direcciones IPv4/IPv6 de cada interfaz, con su MAC"""
        try:
            if_addrs = psutil.net_if_addrs()
        except (OSError, psutil.Error) as e:
            logger.error("Error listing network interfaces: %s", e)
            raise InterfaceQueryFailed(str(e)) from e

        interfaces: Dict[str, List[InterfaceAddress]] = {}
        for name, addrs in if_addrs.items():
            mac = _mac_of(addrs)
            entries = []
            for addr in addrs:
                family = FAMILIES.get(addr.family)
                if family is None:
                    continue
                entries.append(InterfaceAddress(
                    address=addr.address,
                    netmask=addr.netmask or "",
                    family=family,
                    mac=mac,
                    internal=_is_loopback(addr.address),
                ))
            interfaces[name] = entries
        return interfaces


def _mac_of(addrs) -> str:
    for addr in addrs:
        if addr.family == psutil.AF_LINK and addr.address:
            return addr.address.replace("-", ":").lower()
    return EMPTY_MAC


def _is_loopback(address: str) -> bool:
    # Las IPv6 de enlace local llevan sufijo de zona: fe80::1%eth0
    try:
        return ipaddress.ip_address(address.split("%", 1)[0]).is_loopback
    except ValueError:
        return False
