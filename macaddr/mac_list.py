import logging
from typing import Iterable

from macaddr.mac_address import MacAddress
from macaddr.parse_error import ParseError

COMMENT_PREFIX = '#'


def collect_macs(lines: Iterable[str], logger: logging.Logger) -> list[MacAddress]:
    """
    Parse one address per string, in input order. Reading the strings is up
    to the caller; any iterable of str will do.

    Blank lines and '#' comments are skipped. Lines that do not parse are
    reported on the logger and skipped; duplicates are kept.
    """
    macs: list[MacAddress] = []
    for line_no, line in enumerate(lines, start=1):
        text = line.strip()
        if not text or text.startswith(COMMENT_PREFIX):
            continue
        try:
            macs.append(MacAddress.parse(text))
        except ParseError as exc:
            logger.warning(f"Skipping line {line_no} '{text}': {exc}")
            continue
    return macs


def unique_macs(macs: Iterable[MacAddress]) -> list[MacAddress]:
    seen: set[MacAddress] = set()
    result: list[MacAddress] = []
    for mac in macs:
        if mac in seen:
            continue
        seen.add(mac)
        result.append(mac)
    return result
