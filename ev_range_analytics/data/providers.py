"""
Snapshot providers for vehicle health history.

The analytics functions never fetch data; they are handed a history that a
provider loaded. Providers here are deliberately simple: an in-memory store
for fixtures and tests, and a read-only CSV loader for exported histories.
"""

from __future__ import annotations

import warnings
from pathlib import Path
from typing import Dict, List, Protocol, Sequence, Union

import pandas as pd

from ..vehicle.state import (
    ChargeState,
    SnapshotTrigger,
    TirePressure,
    VehicleHealthSnapshot,
)


class SnapshotProvider(Protocol):
    """Source of a per-owner, time-ordered health snapshot history."""

    def load_history(self, user_id: str) -> List[VehicleHealthSnapshot]:
        ...

    def append(self, snapshot: VehicleHealthSnapshot) -> None:
        ...


class InMemorySnapshotProvider:
    """
    Append-only in-memory history, keyed by owner.

    Appending a snapshot older than the owner's latest entry raises
    ValueError so the history stays ordered by timestamp.
    """

    def __init__(self, snapshots: Sequence[VehicleHealthSnapshot] = ()):
        self._histories: Dict[str, List[VehicleHealthSnapshot]] = {}
        for snapshot in sorted(snapshots, key=lambda s: s.timestamp):
            self.append(snapshot)

    def load_history(self, user_id: str) -> List[VehicleHealthSnapshot]:
        # Copy so callers cannot mutate the stored history
        return list(self._histories.get(user_id, []))

    def append(self, snapshot: VehicleHealthSnapshot) -> None:
        history = self._histories.setdefault(snapshot.user_id, [])
        if history and snapshot.timestamp < history[-1].timestamp:
            raise ValueError(
                f"Snapshot at {snapshot.timestamp.isoformat()} is older than the latest "
                f"entry ({history[-1].timestamp.isoformat()}) for user '{snapshot.user_id}'"
            )
        history.append(snapshot)

    def owners(self) -> List[str]:
        return sorted(self._histories)


# Columns expected in a snapshot CSV export
SNAPSHOT_COLUMNS = [
    "user_id", "timestamp", "battery_percent", "range_miles",
    "nominal_full_pack_energy", "odometer",
    "tire_front_left", "tire_front_right", "tire_rear_left", "tire_rear_right",
    "software_version", "trigger",
]


class CsvSnapshotProvider:
    """
    Provides health snapshots from a CSV export.

    Expected columns: see SNAPSHOT_COLUMNS. Optional columns ``charge_state``,
    ``charge_limit_percent`` and ``snapshot_id`` are used when present.
    Rows that cannot be parsed are skipped with a RuntimeWarning.
    """

    def __init__(self, csv_path: Union[str, Path]):
        path = Path(csv_path)
        if not path.exists():
            raise FileNotFoundError(f"Snapshot CSV not found: {path}")
        self.df = pd.read_csv(path, dtype={"user_id": str, "software_version": str})
        missing = [c for c in SNAPSHOT_COLUMNS if c not in self.df.columns]
        if missing:
            raise ValueError(f"Snapshot CSV {path} is missing columns: {missing}")
        self._histories = self._build_histories()

    def _build_histories(self) -> Dict[str, List[VehicleHealthSnapshot]]:
        """Parse rows into snapshots grouped by owner, sorted by timestamp."""
        df = self.df.copy()
        df["timestamp"] = pd.to_datetime(df["timestamp"], errors="coerce", utc=True)

        if not df["timestamp"].dropna().is_monotonic_increasing:
            warnings.warn(
                "Snapshot CSV rows are not in timestamp order; sorting them.",
                RuntimeWarning,
            )
        df = df.sort_values("timestamp", kind="mergesort")

        histories: Dict[str, List[VehicleHealthSnapshot]] = {}
        skipped = 0
        for _, row in df.iterrows():
            try:
                snapshot = self._row_to_snapshot(row)
            except (TypeError, ValueError):
                skipped += 1
                continue
            histories.setdefault(snapshot.user_id, []).append(snapshot)

        if skipped:
            warnings.warn(
                f"Skipped {skipped} malformed row(s) in snapshot CSV.",
                RuntimeWarning,
            )
        return histories

    @staticmethod
    def _row_to_snapshot(row: pd.Series) -> VehicleHealthSnapshot:
        if pd.isna(row["timestamp"]):
            raise ValueError("missing timestamp")

        charge_state = ChargeState.DISCONNECTED
        if "charge_state" in row and not pd.isna(row["charge_state"]):
            charge_state = ChargeState(str(row["charge_state"]))
        charge_limit = 80.0
        if "charge_limit_percent" in row and not pd.isna(row["charge_limit_percent"]):
            charge_limit = float(row["charge_limit_percent"])
        snapshot_id = None
        if "snapshot_id" in row and not pd.isna(row["snapshot_id"]):
            snapshot_id = str(row["snapshot_id"])

        numeric = {
            name: float(row[name])
            for name in ("battery_percent", "range_miles", "nominal_full_pack_energy", "odometer",
                         "tire_front_left", "tire_front_right", "tire_rear_left", "tire_rear_right")
        }
        if any(pd.isna(v) for v in numeric.values()):
            raise ValueError("missing numeric value")

        return VehicleHealthSnapshot(
            user_id=str(row["user_id"]),
            timestamp=row["timestamp"].to_pydatetime(),
            battery_percent=numeric["battery_percent"],
            range_miles=numeric["range_miles"],
            nominal_full_pack_energy=numeric["nominal_full_pack_energy"],
            odometer=numeric["odometer"],
            tire_pressure=TirePressure(
                front_left=numeric["tire_front_left"],
                front_right=numeric["tire_front_right"],
                rear_left=numeric["tire_rear_left"],
                rear_right=numeric["tire_rear_right"],
            ),
            software_version=str(row["software_version"]),
            trigger=SnapshotTrigger(str(row["trigger"])),
            charge_state=charge_state,
            charge_limit_percent=charge_limit,
            snapshot_id=snapshot_id,
        )

    def load_history(self, user_id: str) -> List[VehicleHealthSnapshot]:
        return list(self._histories.get(user_id, []))

    def append(self, snapshot: VehicleHealthSnapshot) -> None:
        raise NotImplementedError("CsvSnapshotProvider is read-only")

    def owners(self) -> List[str]:
        return sorted(self._histories)


def history_frame(history: Sequence[VehicleHealthSnapshot]) -> pd.DataFrame:
    """Tabulate a history (one row per snapshot) for charting or export."""
    if not history:
        return pd.DataFrame(columns=SNAPSHOT_COLUMNS)
    return pd.DataFrame([s.to_record() for s in history])
