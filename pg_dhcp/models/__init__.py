"""
Data models for server statistics.
"""

from .stats import MemStats, PoolStat, StatusResp

__all__ = ["MemStats", "PoolStat", "StatusResp"]
