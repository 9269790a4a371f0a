"""Institution parsers."""
from .base import BaseBrokerParser
from .comdirect import ComdirectParser
from .consorsbank import ConsorsbankParser
from .direkt1822 import Direkt1822Parser
from .dkb import DkbParser
from .ing import IngParser
from .onvista import OnvistaParser
from .postbank import PostbankParser
from .smartbroker import SmartbrokerParser


def default_parsers() -> list[BaseBrokerParser]:
    return [
        Direkt1822Parser(),
        ComdirectParser(),
        ConsorsbankParser(),
        DkbParser(),
        IngParser(),
        OnvistaParser(),
        PostbankParser(),
        SmartbrokerParser(),
    ]


__all__ = [
    "BaseBrokerParser",
    "ComdirectParser",
    "ConsorsbankParser",
    "Direkt1822Parser",
    "DkbParser",
    "IngParser",
    "OnvistaParser",
    "PostbankParser",
    "SmartbrokerParser",
    "default_parsers",
]
