"""Parser for the TP-Link Easy Smart ``PortStatisticsRpm.htm`` page.

The page carries its data in an inline script block::

    <script>
    var max_port_num = 8;
    var all_info = {
    state:[0,1,1,1,1,1,1,1,0,0],
    link_status:[0,6,0,0,0,5,6,6,0,0],
    pkts:[11,0,0,0,208626,0,59405,0, ...]
    };
    </script>

``pkts`` holds four counters per port: tx good, tx bad, rx good, rx bad.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any

from switchexporter.exceptions import AuthenticationFailed, MalformedField, UnrecognizedPageFormat
from switchexporter.models.port import AdminStatus, LinkStatus, OperStatus
from switchexporter.models.stats import PortStatistics

LOGIN_FAILED_MARKER = "logonInfo = new Array"

PKTS_PER_PORT = 4

# Counters on the page are signed 64-bit integers.
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_ARRAY = r"\[[^\]]*\]"

PORT_STATUS_RE = re.compile(
    r"<script>"
    r".*?max_port_num\s+=\s+(?P<max_port_num>\d+);"
    rf".*?state:(?P<state>{_ARRAY}),"
    rf".*?link_status:(?P<link_status>{_ARRAY}),"
    rf".*?pkts:(?P<pkts>{_ARRAY})"
    r".*?</script>",
    re.DOTALL,
)

_STATE_TO_ADMIN = {
    0: AdminStatus.DOWN,
    1: AdminStatus.UP,
}

LINK_STATUS_TABLE: dict[int, tuple[OperStatus, float]] = {
    LinkStatus.DOWN: (OperStatus.DOWN, 0.0),
    LinkStatus.AUTO: (OperStatus.DOWN, 0.0),
    LinkStatus.HALF_10: (OperStatus.UP, 1e7),
    LinkStatus.FULL_10: (OperStatus.UP, 1e7),
    LinkStatus.HALF_100: (OperStatus.UP, 1e8),
    LinkStatus.FULL_100: (OperStatus.UP, 1e8),
    LinkStatus.FULL_1000: (OperStatus.UP, 1e9),
}


@dataclass(frozen=True)
class StatusFields:
    """Raw text of the fields captured from the status script block."""

    max_port_num: str
    state: str
    link_status: str
    pkts: str


def _to_text(page: bytes | str) -> str:
    if isinstance(page, bytes):
        return page.decode("utf-8", errors="replace")
    return page


def extract_status_fields(page: bytes | str) -> StatusFields:
    """Locate the port statistics script block and capture its raw fields.

    This is the only place that knows the page layout.

    Raises:
        UnrecognizedPageFormat: If the script block is not present.
    """
    text = _to_text(page)
    match = PORT_STATUS_RE.search(text)
    if match is None:
        raise UnrecognizedPageFormat("regular expression for port statistics did not match", page=text)

    return StatusFields(
        max_port_num=match.group("max_port_num"),
        state=match.group("state"),
        link_status=match.group("link_status"),
        pkts=match.group("pkts"),
    )


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _in_range(value: int) -> bool:
    return INT64_MIN <= value <= INT64_MAX


def _decode_int(field: str, raw: str) -> int:
    try:
        value = json.loads(raw)
    except ValueError as e:
        raise MalformedField(field, raw, str(e)) from e
    if not _is_int(value):
        raise MalformedField(field, raw, "not an integer")
    if not _in_range(value):
        raise MalformedField(field, raw, "value out of range")
    return value


def _decode_int_array(field: str, raw: str, min_len: int) -> list[int]:
    try:
        value = json.loads(raw)
    except ValueError as e:
        raise MalformedField(field, raw, str(e)) from e
    if not isinstance(value, list) or not all(_is_int(v) for v in value):
        raise MalformedField(field, raw, "not an integer array")
    if not all(_in_range(v) for v in value):
        raise MalformedField(field, raw, "value out of range")
    if len(value) < min_len:
        raise MalformedField(field, raw, f"expected at least {min_len} values, got {len(value)}")
    return value


def map_admin_status(state: int) -> AdminStatus:
    """Map a ``state`` entry to AdminStatus; unexpected values are UNKNOWN."""
    return _STATE_TO_ADMIN.get(state, AdminStatus.UNKNOWN)


def map_link_status(link_status: int) -> tuple[OperStatus, float]:
    """Map a ``link_status`` entry to (OperStatus, speed in bits/s)."""
    return LINK_STATUS_TABLE.get(link_status, (OperStatus.DOWN, 0.0))


def parse_port_statistics(page: bytes | str) -> list[PortStatistics]:
    """Parse the port statistics page into one PortStatistics per port.

    Position ``i`` of the returned list describes port ``i + 1``.

    Raises:
        AuthenticationFailed: The page is the login page.
        UnrecognizedPageFormat: The statistics script block is missing.
        MalformedField: A captured field failed to decode.
    """
    text = _to_text(page)
    if LOGIN_FAILED_MARKER in text:
        raise AuthenticationFailed("authentication was not successful")

    fields = extract_status_fields(text)

    max_port_num = _decode_int("max_port_num", fields.max_port_num)
    state = _decode_int_array("state", fields.state, max_port_num)
    link_status = _decode_int_array("link_status", fields.link_status, max_port_num)
    pkts = _decode_int_array("pkts", fields.pkts, PKTS_PER_PORT * max_port_num)

    stats: list[PortStatistics] = []
    for pos in range(max_port_num):
        oper_status, speed = map_link_status(link_status[pos])
        tx_good, tx_bad, rx_good, rx_bad = pkts[PKTS_PER_PORT * pos : PKTS_PER_PORT * pos + PKTS_PER_PORT]
        stats.append(
            PortStatistics(
                admin_status=map_admin_status(state[pos]),
                oper_status=oper_status,
                speed=speed,
                in_ucast_pkts=float(rx_good),
                in_errors=float(rx_bad),
                out_ucast_pkts=float(tx_good),
                out_errors=float(tx_bad),
            )
        )

    return stats
