from __future__ import annotations

from typing import Iterable

from typing_extensions import Self

from macaddr.mac_parser import MAC_LEN, parse_octets

# Individual/Group and Universal/Local bits of the first octet
IG_BIT = 0x01
UL_BIT = 0x02

INT_MASK = (1 << (8 * MAC_LEN)) - 1


class MacAddress:
    def __init__(self, mac: Iterable[int]) -> None:
        if isinstance(mac, (int, str)):
            raise TypeError(f"MAC address needs a sequence of octets, not {type(mac).__name__}")
        mac = bytes(mac)
        if len(mac) != MAC_LEN:
            raise ValueError(f"MAC address must be {MAC_LEN} bytes, got {len(mac)}")
        self.__mac = mac

    @classmethod
    def from_bytes(cls, mac: Iterable[int]) -> Self:
        return cls(mac)

    @classmethod
    def from_int(cls, value: int) -> Self:
        # Bits above the low 48 are dropped, not validated
        return cls((value & INT_MASK).to_bytes(MAC_LEN, 'little'))

    @classmethod
    def parse(cls, text: str) -> Self:
        return cls(parse_octets(text))

    @property
    def bytes(self) -> bytes:
        return self.__mac

    def to_bytes(self) -> bytes:
        return self.__mac

    def to_int(self) -> int:
        return int.from_bytes(self.__mac, 'little')

    def unicast(self) -> bool:
        return self.__mac[0] & IG_BIT == 0

    def multicast(self) -> bool:
        return not self.unicast()

    def local(self) -> bool:
        return self.__mac[0] & UL_BIT != 0

    def replace_byte(self, index: int, value: int) -> Self:
        mac = bytearray(self.__mac)
        mac[index] = value
        return type(self)(mac)

    def __bytes__(self) -> bytes:
        return self.__mac

    def __int__(self) -> int:
        return self.to_int()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MacAddress):
            return NotImplemented
        return self.__mac == other.__mac

    def __hash__(self) -> int:
        return hash(self.__mac)

    def __str__(self) -> str:
        return ':'.join(f'{b:02X}' for b in self.__mac)

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}.parse('{self}')"


def parse_mac(text: str) -> MacAddress:
    return MacAddress.parse(text)
