"""Per-check result and run report models.

A run checks every candidate against every configured zone of the matching
kind; each pairing yields one CheckResult and the run yields one CheckReport.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List

import yaml

from dnsblclient.models.block_status import BlockStatus


@dataclass
class CheckResult:
    """Result of checking one candidate against one blocklist zone.

    Attributes:
        candidate: IP address or domain that was checked (text form).
        zone: Blocklist zone that was queried.
        status: Blocked or NotBlocked.
        timestamp: When the check completed.
    """

    candidate: str
    zone: str
    status: BlockStatus
    timestamp: datetime

    def is_blocked(self) -> bool:
        """Check if the candidate is listed on this zone.

        Returns:
            bool: True if status is Blocked, False otherwise.
        """
        return self.status.is_blocked()

    def to_json(self) -> dict:
        """Serialize to JSON-compatible dict.

        Returns:
            dict: Candidate, zone, status, message and ISO 8601 timestamp.
        """
        return {
            "candidate": self.candidate,
            "zone": self.zone,
            **self.status.to_json(),
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass
class CheckReport:
    """Aggregated results of one run.

    Attributes:
        results: Every CheckResult of the run.
        duration_ms: Wall time of the run in milliseconds.
        generated_at: Report creation timestamp (UTC).

    Invariants:
        - blocked_count + not_blocked_count == len(results)
        - Serialized results are sorted by (candidate, zone).
    """

    results: List[CheckResult]
    duration_ms: int = 0
    generated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def blocked_count(self) -> int:
        return sum(1 for r in self.results if r.is_blocked())

    @property
    def not_blocked_count(self) -> int:
        return len(self.results) - self.blocked_count

    def listings(self) -> Dict[str, Dict[str, str | None]]:
        """Group listings by candidate.

        Returns:
            dict: candidate -> {zone: message}, only for blocked results,
                  keys sorted alphabetically.
        """
        grouped: Dict[str, Dict[str, str | None]] = {}
        for result in sorted(self.results, key=lambda r: (r.candidate, r.zone)):
            if result.is_blocked():
                grouped.setdefault(result.candidate, {})[result.zone] = (
                    result.status.message  # type: ignore[union-attr]
                )
        return grouped

    def to_json(self) -> dict:
        """Serialize to JSON-compatible dict.

        Returns:
            dict: Run summary plus every result, sorted by (candidate, zone).
        """
        return {
            "summary": {
                "generated_at": self.generated_at.isoformat(),
                "total_checks": len(self.results),
                "blocked": self.blocked_count,
                "not_blocked": self.not_blocked_count,
                "duration_ms": self.duration_ms,
            },
            "results": [
                r.to_json()
                for r in sorted(self.results, key=lambda r: (r.candidate, r.zone))
            ],
        }

    def to_yaml(self) -> str:
        """Generate YAML listing report.

        Returns:
            str: YAML string with header comments and listings per candidate.
        """
        header = [
            "# DNSBL listings",
            f"# Generated: {self.generated_at.isoformat()}",
            f"# Checks: {len(self.results)}, blocked: {self.blocked_count}",
        ]

        yaml_output = yaml.safe_dump(
            {"listings": self.listings()}, default_flow_style=False, sort_keys=False
        )

        return "\n".join(header) + "\n" + yaml_output
