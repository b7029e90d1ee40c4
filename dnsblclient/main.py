"""Command-line entry point: check candidates against configured blocklists."""

import asyncio
import logging
import sys
import time
from datetime import datetime, timezone

from dnsblclient.config import Config
from dnsblclient.models.check_result import CheckReport, CheckResult
from dnsblclient.models.domain import BlockList, Domain
from dnsblclient.services.dnsbl import DNSBL
from dnsblclient.services.logger import (
    setup_logging,
    log_check_result,
    log_run_summary,
)
from dnsblclient.services.reporter import CheckReporter
from dnsblclient.utils.ip_utils import is_valid_ip


logger = logging.getLogger(__name__)


async def check_one(
    dnsbl: DNSBL,
    semaphore: asyncio.Semaphore,
    candidate: str,
    zone: BlockList,
) -> CheckResult:
    """Check one candidate against one zone.

    Args:
        dnsbl: Shared lookup engine.
        semaphore: Bounds the number of checks in flight.
        candidate: IP address or domain text (already validated).
        zone: Blocklist zone.

    Returns:
        CheckResult: Outcome of the check.
    """
    async with semaphore:
        start = time.time()
        if is_valid_ip(candidate):
            status = await dnsbl.check_ip(zone, candidate)
        else:
            status = await dnsbl.check_domain(zone, Domain.from_text(candidate))

    log_check_result(
        candidate=candidate,
        zone=str(zone),
        blocked=status.is_blocked(),
        message=getattr(status, "message", None),
        duration_ms=int((time.time() - start) * 1000),
    )
    return CheckResult(
        candidate=candidate,
        zone=str(zone),
        status=status,
        timestamp=datetime.now(timezone.utc),
    )


async def run_checks(
    dnsbl: DNSBL, config: Config, candidates: list[str]
) -> CheckReport:
    """Check IP candidates against IP zones and domains against domain zones.

    Args:
        dnsbl: Shared lookup engine.
        config: Application configuration.
        candidates: IP addresses and/or domain names.

    Returns:
        CheckReport: Every result of the run.

    Raises:
        InvalidNameError: If a domain candidate is not a valid DNS name.
    """
    start_time = time.time()
    semaphore = asyncio.Semaphore(config.dns_concurrency)

    pairs: list[tuple[str, BlockList]] = []
    for candidate in candidates:
        if is_valid_ip(candidate):
            zones = config.dnsbl_zones
        else:
            # Validate up front so a bad name fails the run before any query
            Domain.from_text(candidate)
            zones = config.dnsbl_domain_zones

        if not zones:
            logger.warning(f"No blocklist zones configured for candidate {candidate}")
        pairs.extend((candidate, zone) for zone in zones)

    results = await asyncio.gather(
        *(check_one(dnsbl, semaphore, candidate, zone) for candidate, zone in pairs)
    )

    return CheckReport(
        results=list(results),
        duration_ms=int((time.time() - start_time) * 1000),
    )


def main(argv: list[str] | None = None) -> int:
    """Main execution function.

    Args:
        argv: Candidates to check; defaults to sys.argv[1:].

    Returns:
        int: Exit code (0 for success, 1 for fatal error).
    """
    candidates = sys.argv[1:] if argv is None else argv
    start_time = time.time()

    try:
        config = Config.from_env()
    except ValueError as e:
        setup_logging()
        logger.error(f"Invalid configuration: {e}")
        return 1

    setup_logging(config.verbose)

    if not candidates:
        logger.error("Usage: dnsbl-check CANDIDATE [CANDIDATE ...]")
        return 1

    logger.info(
        f"Configuration loaded: {len(config.dnsbl_zones)} IP zones, "
        f"{len(config.dnsbl_domain_zones)} domain zones"
    )

    async def run() -> CheckReport:
        dnsbl = await DNSBL.create(config)
        return await run_checks(dnsbl, config, candidates)

    try:
        report = asyncio.run(run())
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        return 1

    print(CheckReporter.render(report, config.report_format))

    duration_sec = time.time() - start_time
    log_run_summary(
        candidates=len(candidates),
        total_checks=len(report.results),
        blocked=report.blocked_count,
        duration_sec=duration_sec,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
