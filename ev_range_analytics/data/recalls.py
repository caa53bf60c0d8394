"""
Recall registry records.

The engine does not query any recall registry itself. Callers fetch recalls
through something implementing RecallRegistry and hand the records to
``analytics.alerts.recall_alerts`` for display next to the service alerts.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Protocol


@dataclass(frozen=True)
class RecallRecord:
    """A single safety recall campaign."""
    campaign_number: str
    component: str
    summary: str
    consequence: str = ""
    remedy: str = ""
    report_received_date: str = ""
    make: str = ""
    model: str = ""
    model_year: str = ""

    @classmethod
    def from_registry_payload(cls, payload: Dict[str, Any]) -> "RecallRecord":
        """Build from an NHTSA-style result dict (PascalCase keys)."""
        return cls(
            campaign_number=str(payload.get("NHTSACampaignNumber", "")),
            component=str(payload.get("Component", "")),
            summary=str(payload.get("Summary", "")),
            consequence=str(payload.get("Consequence", "")),
            remedy=str(payload.get("Remedy", "")),
            report_received_date=str(payload.get("ReportReceivedDate", "")),
            make=str(payload.get("Make", "")),
            model=str(payload.get("Model", "")),
            model_year=str(payload.get("ModelYear", "")),
        )


class RecallRegistry(Protocol):
    """Read-only recall lookup. Implementations return [] when unavailable."""

    def recalls_for(self, make: str, model: str, year: str) -> List[RecallRecord]:
        ...
