"""IEEE 802 MAC address value type."""

__version__ = "0.1.0"

from .log import make_logger
from .mac_address import MacAddress, parse_mac
from .mac_list import collect_macs, unique_macs
from .mac_parser import MAC_LEN
from .parse_error import ParseError


__all__ = [
    "__version__",
    "MAC_LEN",
    "MacAddress",
    "ParseError",
    "collect_macs",
    "make_logger",
    "parse_mac",
    "unique_macs",
]
