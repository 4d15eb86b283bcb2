from dataclasses import dataclass, field
from typing import List

# Sin base de datos: cada petición reconstruye estos valores.


@dataclass
class WiFiNetwork:
    ssid: str
    signal_percent: int = 0
    network_type: str = "Unknown"
    authentication: str = "Unknown"
    encryption: str = "Unknown"
    connected: bool = False

    def to_dict(self) -> dict:
        return {
            "ssid": self.ssid,
            "signal": self.signal_percent,
            "type": self.network_type,
            "authentication": self.authentication,
            "encryption": self.encryption,
            "connected": self.connected,
        }


@dataclass
class ConnectedNetwork:
    ssid: str
    signal_percent: int = 0
    channel: int = 0
    radio_type: str = "Unknown"
    authentication: str = "Unknown"
    encryption: str = "Unknown"

    def to_dict(self) -> dict:
        return {
            "ssid": self.ssid,
            "signal": self.signal_percent,
            "channel": self.channel,
            "radioType": self.radio_type,
            "authentication": self.authentication,
            "encryption": self.encryption,
        }


@dataclass
class SpeedProbeResult:
    url: str
    download_speed: float
    download_time_ms: int
    file_size: int

    def to_dict(self) -> dict:
        return {
            "url": self.url,
            "downloadSpeed": self.download_speed,
            "downloadTime": self.download_time_ms,
            "fileSize": self.file_size,
        }


@dataclass
class SpeedTestReport:
    download_speed: float
    download_time_ms: int
    file_size: int
    timestamp: str
    details: List[SpeedProbeResult] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "downloadSpeed": self.download_speed,
            "downloadTime": self.download_time_ms,
            "fileSize": self.file_size,
            "timestamp": self.timestamp,
            "details": [d.to_dict() for d in self.details],
        }


@dataclass
class InterfaceAddress:
    address: str
    netmask: str
    family: str
    mac: str
    internal: bool

    def to_dict(self) -> dict:
        return {
            "address": self.address,
            "netmask": self.netmask,
            "family": self.family,
            "mac": self.mac,
            "internal": self.internal,
        }
