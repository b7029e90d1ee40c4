"""Blocklist lookup result models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Blocked:
    """Candidate is listed on the blocklist.

    Attributes:
        message: Listing reason from the zone's TXT records, or None if the
            zone published no reason (or it decoded to nothing).
    """

    message: str | None = None

    def is_blocked(self) -> bool:
        """Always True for a listing."""
        return True

    def to_json(self) -> dict:
        """Serialize to JSON-compatible dict.

        Returns:
            dict: {"status": "blocked", "message": <reason or None>}.
        """
        return {"status": "blocked", "message": self.message}


@dataclass(frozen=True)
class NotBlocked:
    """Candidate is not listed (or the listing could not be confirmed)."""

    def is_blocked(self) -> bool:
        """Always False."""
        return False

    def to_json(self) -> dict:
        """Serialize to JSON-compatible dict.

        Returns:
            dict: {"status": "not_blocked", "message": None}.
        """
        return {"status": "not_blocked", "message": None}


# Closed result type; match on Blocked / NotBlocked
BlockStatus = Blocked | NotBlocked
