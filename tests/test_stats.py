"""
Tests for server statistics records.
"""

from ipaddress import IPv4Address

from pg_dhcp.models.stats import MemStats, PoolStat, StatusResp


def test_pool_stat_from_dict() -> None:
    stat = PoolStat.from_dict(
        {
            "NetworkName": "Lab",
            "Subnet": "10.0.1.0/24",
            "Start": "10.0.1.10",
            "End": "10.0.1.200",
            "Registered": True,
            "Total": 191,
            "Active": 40,
            "Claimed": 5,
            "Abandoned": 1,
            "Free": 145,
        }
    )

    assert stat.network_name == "Lab"
    assert stat.start == IPv4Address("10.0.1.10")
    assert stat.end == IPv4Address("10.0.1.200")
    assert stat.registered is True
    assert stat.used == 46
    assert stat.utilization == 46 / 191


def test_pool_stat_defaults() -> None:
    stat = PoolStat.from_dict({})
    assert stat.start is None
    assert stat.total == 0
    assert stat.utilization == 0.0


def test_status_from_dict() -> None:
    status = StatusResp.from_dict(
        {
            "GoRoutines": 12,
            "Uptime": 3600,
            "Memory": {"Alloc": 2 * 1024 * 1024, "Sys": 8 * 1024 * 1024, "NumGC": 7},
        }
    )

    assert status.go_routines == 12
    assert status.uptime == 3600.0
    assert status.memory.alloc_mb == 2.0
    assert status.memory.sys_mb == 8.0
    assert status.memory.num_gc == 7


def test_status_from_none() -> None:
    status = StatusResp.from_dict(None)
    assert status.go_routines == 0
    assert status.memory == MemStats()
