"""
Snapshot providers and external record types.

The engine consumes health histories through SnapshotProvider and recall
records through RecallRegistry; it never performs I/O itself.
"""

from ev_range_analytics.data.providers import (
    SnapshotProvider,
    InMemorySnapshotProvider,
    CsvSnapshotProvider,
    SNAPSHOT_COLUMNS,
    history_frame,
)
from ev_range_analytics.data.recalls import RecallRecord, RecallRegistry

__all__ = [
    'SnapshotProvider', 'InMemorySnapshotProvider', 'CsvSnapshotProvider',
    'SNAPSHOT_COLUMNS', 'history_frame', 'RecallRecord', 'RecallRegistry',
]
