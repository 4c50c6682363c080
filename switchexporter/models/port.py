"""Port status enums."""

from __future__ import annotations

from enum import IntEnum


class AdminStatus(IntEnum):
    """Administrative port state, numbered like IF-MIB ifAdminStatus.

    UNKNOWN is reported when the switch sends a state other than
    disabled/enabled.
    """

    UNKNOWN = 0
    UP = 1
    DOWN = 2


class OperStatus(IntEnum):
    """Operational link state, numbered like IF-MIB ifOperStatus."""

    UP = 1
    DOWN = 2


class LinkStatus(IntEnum):
    """Link states as enumerated by the switch web UI (``link_info``)."""

    DOWN = 0
    AUTO = 1
    HALF_10 = 2
    FULL_10 = 3
    HALF_100 = 4
    FULL_100 = 5
    FULL_1000 = 6
