"""Run report rendering in JSON or YAML."""

import json

from dnsblclient.models.check_result import CheckReport


class CheckReporter:
    """Formats a CheckReport for stdout.

    JSON carries every result; YAML carries only the listings, ready to be
    pasted into a ticket or config review.
    """

    @staticmethod
    def generate_json_report(report: CheckReport) -> str:
        """Generate JSON-formatted report.

        Args:
            report: CheckReport of the run.

        Returns:
            str: Pretty-printed JSON string with sorted keys for determinism.
        """
        return json.dumps(report.to_json(), indent=2, sort_keys=True)

    @staticmethod
    def generate_yaml_report(report: CheckReport) -> str:
        """Generate YAML-formatted listing report.

        Example:
            >>> print(CheckReporter.generate_yaml_report(report))
            # DNSBL listings
            # Generated: 2026-10-19T10:30:00+00:00
            # Checks: 2, blocked: 1
            listings:
              192.0.2.1:
                zen.example.org: Listed for spam
        """
        return report.to_yaml()

    @classmethod
    def render(cls, report: CheckReport, report_format: str) -> str:
        """Render in the configured format.

        Raises:
            ValueError: If report_format is not "json" or "yaml".
        """
        if report_format == "json":
            return cls.generate_json_report(report)
        if report_format == "yaml":
            return cls.generate_yaml_report(report)
        raise ValueError(f"Unsupported report format: {report_format}")
