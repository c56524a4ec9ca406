import string
from typing import Iterator

from macaddr.parse_error import ParseError

MAC_LEN = 6
MIN_TEXT_LEN = 2 * MAC_LEN
SEPARATORS = (' ', ':')
HEX_BASE = 16


def _next_char(chars: Iterator[str]) -> str:
    try:
        return next(chars)
    except StopIteration:
        raise ParseError() from None


def _hex_digit(c: str) -> int:
    # int() alone would also take non-ASCII digits
    if c not in string.hexdigits:
        raise ParseError()
    return int(c, HEX_BASE)


def parse_octets(text: str) -> bytes:
    """
    Read six octets from text such as '0f0f0f0f0f0f', '0F:0F:0F:0F:0F:0F'
    or '0F 0F 0F 0F 0F 0F'.

    A single separator is skipped only where a pair is expected to start,
    so ':00:01:02:03:04:05' parses while '00::01:02:03:04:05' and
    '0:00:01:02:03:04:05' do not. Anything after the sixth octet is ignored.
    """
    if len(text) < MIN_TEXT_LEN:
        raise ParseError()

    chars = iter(text)
    octets = bytearray()
    while len(octets) < MAC_LEN:
        left = _next_char(chars)
        right = _next_char(chars)

        if left in SEPARATORS:
            left = right
            right = _next_char(chars)

        high = _hex_digit(left) * HEX_BASE
        low = _hex_digit(right)
        octets.append(high + low)

    return bytes(octets)
