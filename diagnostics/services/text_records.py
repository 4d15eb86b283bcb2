"""Separación en bloques y extracción de campos etiquetados.

Herramientas como ``netsh`` imprimen registros como líneas ``Etiqueta : valor``
agrupadas en bloques separados por líneas en blanco. Un :class:`FieldPattern`
une el nombre del campo con la etiqueta a buscar y la regla de captura.
"""

import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Pattern

BLOCK_SEPARATOR = re.compile(r"\r?\n[ \t]*\r?\n")

# La captura no salta de línea: [ \t] en vez de \s alrededor de los dos puntos
REST_OF_LINE = r"([^\r\n]*)"
DIGITS = r"(\d+)"


@dataclass(frozen=True)
class FieldPattern:
    name: str
    regex: Pattern

    def search(self, text: str) -> Optional[str]:
        m = self.regex.search(text)
        if not m:
            return None
        return m.group(1).strip()


def label_field(name: str, label: str, value: str = REST_OF_LINE, suffix: str = "") -> FieldPattern:
    """Patrón para ``<etiqueta> : <valor><sufijo>`` al inicio de línea.

    ``label`` es una regex: permite etiquetas numeradas (``SSID 3``) y no
    confunde vecinas (``SSID`` frente a ``BSSID``).
    """
    regex = re.compile(
        r"^[ \t]*" + label + r"[ \t]*:[ \t]*" + value + suffix,
        re.MULTILINE,
    )
    return FieldPattern(name=name, regex=regex)


def split_blocks(text: str) -> List[str]:
    if not text:
        return []
    return [b for b in BLOCK_SEPARATOR.split(text) if b.strip()]


def extract_fields(text: str, patterns: Iterable[FieldPattern]) -> Dict[str, Optional[str]]:
    """Valor capturado por cada patrón, o None si la etiqueta no aparece."""
    return {p.name: p.search(text or "") for p in patterns}


def parse_blocks(text: str, patterns: Iterable[FieldPattern]) -> List[Dict[str, Optional[str]]]:
    patterns = list(patterns)
    return [extract_fields(block, patterns) for block in split_blocks(text)]


def text_or(value: Optional[str], default: str = "Unknown") -> str:
    return value if value else default


def int_or(value: Optional[str], default: int = 0) -> int:
    try:
        return int(value) if value is not None else default
    except ValueError:
        return default
