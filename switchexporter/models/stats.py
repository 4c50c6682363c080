"""Port statistics data model."""

from __future__ import annotations

from dataclasses import dataclass

from switchexporter.models.port import AdminStatus, OperStatus


@dataclass
class PortStatistics:
    """Status and traffic counters for a single port."""

    admin_status: AdminStatus = AdminStatus.UNKNOWN
    oper_status: OperStatus = OperStatus.DOWN
    speed: float = 0.0
    in_ucast_pkts: float = 0.0
    in_errors: float = 0.0
    out_ucast_pkts: float = 0.0
    out_errors: float = 0.0
